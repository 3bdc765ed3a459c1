import torch

from abc import ABC, abstractmethod

class Logic(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def NOT(self, x: torch.Tensor) -> torch.Tensor:
        pass

    @abstractmethod
    def AND(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        pass

    @abstractmethod
    def OR(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        pass

    def XOR(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.AND(self.OR(x, y), self.NAND(x, y))

    def IMPL(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.OR(self.NOT(x), y)

    def EQUIV(self, P: torch.Tensor, Q: torch.Tensor) -> torch.Tensor:
        return self.AND(self.IMPL(P, Q), self.IMPL(Q, P))

    def NAND(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.NOT(self.AND(x, y))

    def NOR(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.NOT(self.OR(x, y))

    def AND_NOT(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.AND(x, self.NOT(y))

    def OR_NOT(self, x: torch.Tensor, y: torch.Tensor) -> torch.Tensor:
        return self.OR(x, self.NOT(y))

    # compound implications: x → (y ∧ z), x → (y ∨ z), (x ∧ y) → z, (x ∨ y) → z
    def IMPL_AND(self, x: torch.Tensor, y: torch.Tensor, z: torch.Tensor) -> torch.Tensor:
        return self.IMPL(x, self.AND(y, z))

    def IMPL_OR(self, x: torch.Tensor, y: torch.Tensor, z: torch.Tensor) -> torch.Tensor:
        return self.IMPL(x, self.OR(y, z))

    def AND_IMPL(self, x: torch.Tensor, y: torch.Tensor, z: torch.Tensor) -> torch.Tensor:
        return self.IMPL(self.AND(x, y), z)

    def OR_IMPL(self, x: torch.Tensor, y: torch.Tensor, z: torch.Tensor) -> torch.Tensor:
        return self.IMPL(self.OR(x, y), z)
