"""
Boolean connectives rewritten as linear constraints over 0/1 integers.

Every encoding below is a single expression that a linear or integer
program can express directly. The operators in use are restricted to:

    +  -  ==  <  <=  >  >=   and the conjunction of two comparisons

Boolean literals, bitwise operators, multiplication, division, negation,
disjunction and != never appear. Inputs are integers in {0, 1}; anything
else has no defined meaning and is not checked here (see LinearLogic for
an opt-in check). Inputs may be plain ints or integer tensors of any shape.
Tensors are evaluated element-wise into bool tensors; a scalar result is
returned as a plain bool.
"""

import torch

from typing import Union

from logic import Logic

TruthValue = Union[int, torch.Tensor]
Result = Union[bool, torch.Tensor]

def _truth(x: TruthValue) -> torch.Tensor:
    return torch.as_tensor(x, dtype=torch.uint8)

def _result(r: torch.Tensor) -> Result:
    return r.item() if r.dim() == 0 else r

def not_(a: TruthValue) -> Result:
    a = _truth(a)
    return _result(a == 0)

def and_(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(torch.logical_and(a == 1, b == 1))

def or_(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a + b >= 1)

def xor(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a + b == 1)

def implication(a: TruthValue, b: TruthValue) -> Result:
    """a → b, false only for a = 1, b = 0."""
    a, b = _truth(a), _truth(b)
    return _result(a <= b)

def implication_with_double_consequent_and(a: TruthValue, b: TruthValue, c: TruthValue) -> Result:
    """a → (b ∧ c): a forces both b and c."""
    a, b, c = _truth(a), _truth(b), _truth(c)
    return _result(torch.logical_and(a <= b, a <= c))

def implication_with_double_consequent_or(a: TruthValue, b: TruthValue, c: TruthValue) -> Result:
    """a → (b ∨ c): a forces at least one of b, c."""
    a, b, c = _truth(a), _truth(b), _truth(c)
    return _result(a <= b + c)

def implication_with_double_antecedent_and(a: TruthValue, b: TruthValue, c: TruthValue) -> Result:
    """(a ∧ b) → c: the slack of one admits every row except a = b = 1, c = 0."""
    a, b, c = _truth(a), _truth(b), _truth(c)
    return _result(a + b <= c + 1)

def implication_with_double_antecedent_or(a: TruthValue, b: TruthValue, c: TruthValue) -> Result:
    """(a ∨ b) → c: either a or b alone forces c."""
    a, b, c = _truth(a), _truth(b), _truth(c)
    return _result(torch.logical_and(a <= c, b <= c))

def equivalence(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a == b)

def nand(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a + b <= 1)

def nor(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a + b == 0)

def a_and_not_b(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(a > b)

def a_or_not_b(a: TruthValue, b: TruthValue) -> Result:
    a, b = _truth(a), _truth(b)
    return _result(b <= a)

class LinearLogic(Logic):
    """
    Logic whose connectives are the flat linear encodings above.

    None of the derived connectives is composed from NOT/AND/OR; each one
    overrides the default of Logic with its own constraint. With strict=True
    every input must lie in {0, 1}, otherwise ValueError is raised.
    """

    def __init__(self, strict: bool = False):
        super().__init__(name='linear')
        self.strict = strict

    def check(self, *xs: TruthValue):
        if not self.strict:
            return

        for x in xs:
            x = torch.as_tensor(x)

            if not torch.logical_or(x == 0, x == 1).all():
                raise ValueError(f'truth values must be 0 or 1, got {x.tolist()}')

    def NOT(self, x):
        self.check(x)
        return not_(x)

    def AND(self, x, y):
        self.check(x, y)
        return and_(x, y)

    def OR(self, x, y):
        self.check(x, y)
        return or_(x, y)

    def XOR(self, x, y):
        self.check(x, y)
        return xor(x, y)

    def IMPL(self, x, y):
        self.check(x, y)
        return implication(x, y)

    def EQUIV(self, P, Q):
        self.check(P, Q)
        return equivalence(P, Q)

    def NAND(self, x, y):
        self.check(x, y)
        return nand(x, y)

    def NOR(self, x, y):
        self.check(x, y)
        return nor(x, y)

    def AND_NOT(self, x, y):
        self.check(x, y)
        return a_and_not_b(x, y)

    def OR_NOT(self, x, y):
        self.check(x, y)
        return a_or_not_b(x, y)

    def IMPL_AND(self, x, y, z):
        self.check(x, y, z)
        return implication_with_double_consequent_and(x, y, z)

    def IMPL_OR(self, x, y, z):
        self.check(x, y, z)
        return implication_with_double_consequent_or(x, y, z)

    def AND_IMPL(self, x, y, z):
        self.check(x, y, z)
        return implication_with_double_antecedent_and(x, y, z)

    def OR_IMPL(self, x, y, z):
        self.check(x, y, z)
        return implication_with_double_antecedent_or(x, y, z)
