import argparse

import os
import csv

import sys

import torch

from constraints import CONSTRAINTS, Constraint, get_constraint
from linear_logic import LinearLogic
from truth_table import truth_table

INPUT_NAMES = 'abc'

def write_report(file_name: str, constraint: Constraint, inputs: torch.Tensor, result: torch.Tensor, expected: torch.Tensor):
    with open(file_name, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile, delimiter=',')
        csvfile.write(f'#{sys.argv}\n')
        writer.writerow([*INPUT_NAMES[:constraint.arity], 'linear', 'bool'])

        for row, r, e in zip(inputs.tolist(), result.tolist(), expected.tolist()):
            writer.writerow([*row, int(r), int(e)])

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description='Truth tables of the linear constraint encodings of boolean connectives')
    parser.add_argument('--connective', type=str, default=None, choices=[c.name for c in CONSTRAINTS])
    parser.add_argument('--strict', action='store_true', help='reject inputs other than 0 or 1 with a ValueError')
    parser.add_argument('--reports-dir', type=str, default=None)
    parser.add_argument('--device', type=str, default='cpu')
    args = parser.parse_args(argv)

    device = torch.device(args.device)
    logic = LinearLogic(strict=args.strict)

    if args.reports_dir:
        os.makedirs(args.reports_dir, exist_ok=True)

    constraints = CONSTRAINTS if args.connective is None else [get_constraint(args.connective)]

    failed = []

    for constraint in constraints:
        inputs = truth_table(constraint.arity, device=device)

        result, expected, sat = constraint.eval(logic, inputs)

        print(f'{constraint.name}: {constraint.symbol}')

        for row, r, e in zip(inputs.tolist(), result.tolist(), expected.tolist()):
            assignment = ' '.join(f'{n}={v}' for n, v in zip(INPUT_NAMES, row))
            print(f'  {assignment}\t {logic.name}: {int(r)}\t {constraint.boolean_logic.name}: {int(e)}')

        print(f'  Sat: {sat.item():.4f}')
        print(f'===')

        if args.reports_dir is not None:
            write_report(os.path.join(args.reports_dir, f'{constraint.name}.csv'), constraint, inputs, result, expected)

        if sat.item() < 1.:
            failed.append(constraint.name)

    if failed:
        print(f'{len(failed)} connective(s) disagree with {constraint.boolean_logic.name}: {", ".join(failed)}')
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
