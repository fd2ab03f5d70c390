import math

import torch

from raytracer.material import Material
from raytracer.ray import Ray
from raytracer.vector import dot, normalize, sub


class Object(object):
    def __init__(self, material: Material):
        self.material = material

    def intersects(self, ray: Ray):
        raise NotImplementedError

    def normal_at(self, position):
        raise NotImplementedError


class Intersection(object):
    def __init__(self, object, t, point, normal):
        self.object = object
        self.t = t
        self.point = point
        self.normal = normal


class ObjectList(object):
    def __init__(self, objects):
        self.objects = list(objects)

    def __iter__(self):
        return iter(self.objects)

    def __len__(self):
        return len(self.objects)

    def intersects(self, ray: Ray):
        nearest = None

        for object in self.objects:
            t = object.intersects(ray)
            if t is None:
                continue

            if nearest is None or t < nearest[1]:
                nearest = object, t

        if nearest is None:
            return None

        object, t = nearest
        point = ray.position_at(t)

        return Intersection(object, t, point, object.normal_at(point))


class Sphere(Object):
    def __init__(self, center, radius, material: Material):
        super().__init__(material=material)

        self.center = center
        self.radius = radius

    def intersects(self, ray: Ray):
        sr = sub(ray.origin, self.center)

        a = dot(ray.direction, ray.direction)
        b = 2 * dot(sr, ray.direction)
        c = dot(sr, sr) - self.radius**2

        disc = b**2 - 4 * a * c
        if disc < 0:
            return None

        sqrt = math.sqrt(disc)
        ts = [t for t in ((-b - sqrt) / (2 * a), (-b + sqrt) / (2 * a)) if t >= 0]
        if not ts:
            return None

        return min(ts)

    def normal_at(self, position: torch.Tensor):
        return normalize(sub(position, self.center))
