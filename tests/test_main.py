"""
Tests for the truth table command line.
"""

import csv

import pytest

from constraints import Constraint
from main import main


class TestMain:

    def test_single_connective(self, capsys):
        assert main(['--connective', 'xor']) == 0

        out = capsys.readouterr().out
        assert 'xor: a ⊕ b' in out
        assert 'a=1 b=1' in out
        assert 'Sat: 1.0000' in out

    def test_all_connectives(self, capsys):
        assert main([]) == 0

        out = capsys.readouterr().out
        assert out.count('Sat: 1.0000') == 14

    def test_strict(self, capsys):
        assert main(['--connective', 'implication_with_double_consequent_or', '--strict']) == 0

    def test_reports(self, tmp_path, capsys):
        assert main(['--connective', 'nand', '--reports-dir', str(tmp_path)]) == 0

        with open(tmp_path / 'nand.csv', newline='') as csvfile:
            lines = csvfile.read().splitlines()

        assert lines[0].startswith('#')

        rows = list(csv.reader(lines[1:]))
        assert rows[0] == ['a', 'b', 'linear', 'bool']
        assert rows[1:] == [
            ['0', '0', '1', '1'],
            ['0', '1', '1', '1'],
            ['1', '0', '1', '1'],
            ['1', '1', '0', '0'],
        ]

    def test_unknown_connective(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--connective', 'material_conditional'])

        assert exc_info.value.code == 2

    def test_reports_in_working_directory(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        assert main(['--connective', 'nand', '--reports-dir', '']) == 0
        assert (tmp_path / 'nand.csv').exists()

    def test_reference_evaluated_once(self, monkeypatch, capsys):
        calls = []
        get_constraint = Constraint.get_constraint

        def counting_get_constraint(self, inputs):
            constraint = get_constraint(self, inputs)

            def counted(l):
                calls.append(l.name)
                return constraint(l)

            return counted

        monkeypatch.setattr(Constraint, 'get_constraint', counting_get_constraint)

        assert main(['--connective', 'xor']) == 0
        assert calls == ['linear', 'bool']
