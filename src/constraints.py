import torch

from functools import partial
from typing import Callable, Optional

from logic import Logic
from boolean_logic import BooleanLogic
from truth_table import truth_table, evaluate

class Constraint:
    def __init__(self, name: str, symbol: str, arity: int, formula: Callable[..., torch.Tensor]):
        self.name = name
        self.symbol = symbol
        self.arity = arity
        self.formula = formula
        self.boolean_logic = BooleanLogic()

    def __repr__(self):
        return f'Constraint({self.name!r}, {self.symbol!r})'

    def get_constraint(self, inputs: torch.Tensor) -> Callable[[Logic], torch.Tensor]:
        return lambda l: evaluate(partial(self.formula, l), inputs)

    # usage:
    # result, expected, sat = eval()
    # where expected is the result under boolean logic
    # and sat is the fraction of assignments on which both agree
    def eval(self, logic: Logic, inputs: Optional[torch.Tensor] = None) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
        if inputs is None:
            inputs = truth_table(self.arity)

        constraint = self.get_constraint(inputs)

        result = constraint(logic)
        expected = constraint(self.boolean_logic)

        assert result.shape == expected.shape

        sat = torch.mean((result == expected).float())

        return result, expected, sat

CONSTRAINTS: list[Constraint] = [
    Constraint('not', '¬a', 1, lambda l, a: l.NOT(a)),
    Constraint('and', 'a ∧ b', 2, lambda l, a, b: l.AND(a, b)),
    Constraint('or', 'a ∨ b', 2, lambda l, a, b: l.OR(a, b)),
    Constraint('xor', 'a ⊕ b', 2, lambda l, a, b: l.XOR(a, b)),
    Constraint('implication', 'a → b', 2, lambda l, a, b: l.IMPL(a, b)),
    Constraint('implication_with_double_consequent_and', 'a → (b ∧ c)', 3, lambda l, a, b, c: l.IMPL_AND(a, b, c)),
    Constraint('implication_with_double_consequent_or', 'a → (b ∨ c)', 3, lambda l, a, b, c: l.IMPL_OR(a, b, c)),
    Constraint('implication_with_double_antecedent_and', '(a ∧ b) → c', 3, lambda l, a, b, c: l.AND_IMPL(a, b, c)),
    Constraint('implication_with_double_antecedent_or', '(a ∨ b) → c', 3, lambda l, a, b, c: l.OR_IMPL(a, b, c)),
    Constraint('equivalence', 'a ↔ b', 2, lambda l, a, b: l.EQUIV(a, b)),
    Constraint('nand', '¬(a ∧ b)', 2, lambda l, a, b: l.NAND(a, b)),
    Constraint('nor', '¬(a ∨ b)', 2, lambda l, a, b: l.NOR(a, b)),
    Constraint('a_and_not_b', 'a ∧ ¬b', 2, lambda l, a, b: l.AND_NOT(a, b)),
    Constraint('a_or_not_b', 'a ∨ ¬b', 2, lambda l, a, b: l.OR_NOT(a, b)),
]

def get_constraint(name: str) -> Constraint:
    for c in CONSTRAINTS:
        if c.name == name:
            return c

    raise ValueError(f'Unknown connective: {name}')
