import torch
from dataclasses import dataclass


@dataclass(frozen=True)
class Light(object):
    position: torch.Tensor
    diffuse: torch.Tensor
    specular: torch.Tensor
