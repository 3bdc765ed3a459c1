import torch

from logic import Logic

class BooleanLogic(Logic):
    def __init__(self):
        super().__init__('bool')

    def NOT(self, x):
        return torch.logical_not(torch.as_tensor(x))

    def AND(self, x, y):
        return torch.logical_and(torch.as_tensor(x), torch.as_tensor(y))

    def OR(self, x, y):
        return torch.logical_or(torch.as_tensor(x), torch.as_tensor(y))

    def XOR(self, x, y):
        return torch.logical_xor(torch.as_tensor(x), torch.as_tensor(y))

    def IMPL(self, x, y):
        return torch.logical_or(torch.logical_not(torch.as_tensor(x)), torch.as_tensor(y))
