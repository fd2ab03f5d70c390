import torch

from raytracer.light import Light
from raytracer.objects import Intersection, Object
from raytracer.ray import Ray
from raytracer.scene import Scene
from raytracer.vector import DTYPE, add, clamp, dot, mul, normalize, sub, vector


def color_at(intersection: Intersection, scene: Scene):
    """Phong shading of an intersection with hard shadows.

    Lights behind the surface and lights blocked by another object contribute
    nothing. The specular term raises r.v to the shininess as is, so a
    negative r.v is not cut to zero. The ambient term is added once and the
    result is clamped to [0, 1].
    """

    color = vector()
    material = intersection.object.material
    normal = intersection.normal

    to_cam = normalize(sub(scene.camera.origin, intersection.point))

    for light in scene.lights:
        to_light = normalize(sub(light.position, intersection.point))
        n_dot_l = dot(to_light, normal)

        if n_dot_l < 0:
            continue

        if is_in_shadow(intersection.point, intersection.object, light, scene):
            continue

        color = add(color, mul(mul(material.kd, light.diffuse), n_dot_l))

        reflected = sub(mul(mul(normal, 2), n_dot_l), to_light)
        r_dot_v = torch.as_tensor(dot(reflected, to_cam), dtype=DTYPE)
        color = add(color, mul(material.ks, mul(light.specular, r_dot_v**material.alpha)))

    color = add(color, mul(material.ka, scene.ambient))
    color = clamp(color, 0, 1)

    return color


def is_in_shadow(point, object_to_exclude: Object, light: Light, scene: Scene):
    # direction is not normalized, t = 1 lands on the light
    shadow_ray = Ray(point, sub(light.position, point))

    for object in scene.objects:
        if object is object_to_exclude:
            continue

        t = object.intersects(shadow_ray)
        if t is not None and 0 < t <= 1:
            return True

    return False
