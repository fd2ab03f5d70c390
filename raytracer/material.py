import torch
from dataclasses import dataclass


@dataclass(frozen=True)
class Material(object):
    ka: torch.Tensor
    kd: torch.Tensor
    ks: torch.Tensor
    alpha: float
    kr: torch.Tensor
