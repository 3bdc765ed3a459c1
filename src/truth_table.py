import torch

from itertools import product
from typing import Callable, Optional

def truth_table(arity: int, device: Optional[torch.device] = None) -> torch.Tensor:
    """All assignments of `arity` truth values, one per row, in binary counting order."""
    if arity < 1:
        raise ValueError(f'arity must be at least 1, got {arity}')

    rows = list(product((0, 1), repeat=arity))

    return torch.tensor(rows, dtype=torch.uint8, device=device)

def evaluate(fn: Callable[..., torch.Tensor], table: torch.Tensor) -> torch.Tensor:
    return fn(*table.unbind(dim=1))
