import torch

DTYPE = torch.float


def vector(x=0, y=None, z=None):
    if y is None:
        y = x
    if z is None:
        z = x

    return torch.tensor([x, y, z], dtype=DTYPE)


def as_vector(v):
    """Promotes a number to a uniform vector, passes vectors through unchanged."""

    return torch.as_tensor(v, dtype=DTYPE).expand(3)


def add(a, b):
    return as_vector(a) + as_vector(b)


def sub(a, b):
    return as_vector(a) - as_vector(b)


def mul(a, b):
    return as_vector(a) * as_vector(b)


def div(a, b):
    return as_vector(a) / as_vector(b)


def neg(a):
    return -as_vector(a)


def dot(a, b):
    return torch.dot(as_vector(a), as_vector(b)).item()


def cross(a, b):
    return torch.cross(as_vector(a), as_vector(b), dim=0)


def length_squared(a):
    return dot(a, a)


def length(a):
    return length_squared(a) ** 0.5


def unit(a):
    # zero vectors are not guarded, result is nan
    return div(a, length(a))


normalize = unit


def lerp(start, end, t):
    return add(mul(start, sub(1, t)), mul(end, t))


def floor(a):
    return torch.floor(as_vector(a))


def clamp(v, min, max):
    return torch.min(torch.max(as_vector(v), as_vector(min)), as_vector(max))


def reflect(v, n):
    return sub(mul(n, 2 * dot(n, v)), v)
