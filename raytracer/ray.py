from dataclasses import dataclass

import torch

from raytracer.vector import add, mul


@dataclass(frozen=True)
class Ray(object):
    origin: torch.Tensor
    direction: torch.Tensor

    def position_at(self, t: float):
        return add(self.origin, mul(self.direction, t))
