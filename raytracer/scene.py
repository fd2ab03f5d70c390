from typing import List

from raytracer.camera import Camera
from raytracer.light import Light
from raytracer.objects import Object, ObjectList, Sphere


class Scene(object):
    def __init__(self, camera: Camera, ambient, objects: List[Object], lights: List[Light]):
        self.camera = camera
        self.ambient = ambient
        self.objects = ObjectList(objects)
        self.lights = list(lights)


def validate_scene(scene: Scene):
    """Rejects scene configurations the tracer does not guard against.

    Only meant for freshly loaded configs, tracing itself never validates.
    """

    for object in scene.objects:
        if isinstance(object, Sphere) and object.radius <= 0:
            raise ValueError("expected sphere radius {} to be > 0".format(object.radius))
        if object.material.alpha < 0:
            raise ValueError("expected shininess {} to be >= 0".format(object.material.alpha))
