import torch

from raytracer.camera import Camera
from raytracer.light import Light
from raytracer.material import Material
from raytracer.objects import Sphere
from raytracer.ray import Ray
from raytracer.scene import Scene
from raytracer.shading import color_at
from raytracer.tracer import MAX_BOUNCES, NUM_SAMPLES_PER_DIRECTION, RayTracer
from raytracer.vector import add, mul, vector


def build_camera():
    return Camera(
        origin=vector(0, 0, 5),
        top_left=vector(-2, 2, 3),
        top_right=vector(2, 2, 3),
        bottom_left=vector(-2, -2, 3),
        bottom_right=vector(2, -2, 3),
    )


def build_red_scene():
    sphere = Sphere(
        vector(0, 0, 0),
        1,
        Material(ka=vector(0.1), kd=vector(1, 0, 0), ks=vector(0), alpha=10, kr=vector(0)),
    )
    light = Light(vector(5, 5, 5), diffuse=vector(1), specular=vector(1))

    return Scene(build_camera(), ambient=vector(0.1), objects=[sphere], lights=[light])


def build_mirror_scene():
    # the reflection off the mirror heads back to +z and hits the green sphere
    mirror = Sphere(
        vector(0, 0, 0),
        1,
        Material(ka=vector(0), kd=vector(1, 0, 0), ks=vector(0), alpha=10, kr=vector(1)),
    )
    green = Sphere(
        vector(0, 0, 10),
        1,
        Material(ka=vector(0), kd=vector(0, 1, 0), ks=vector(0), alpha=10, kr=vector(0)),
    )
    light = Light(vector(0, 0, 5), diffuse=vector(0.5), specular=vector(0))

    return Scene(build_camera(), ambient=0, objects=[mirror, green], lights=[light])


def test_defaults():
    tracer = RayTracer(build_red_scene(), 4, 4)

    assert NUM_SAMPLES_PER_DIRECTION == 2
    assert MAX_BOUNCES == 3
    assert tracer.samples_per_direction == NUM_SAMPLES_PER_DIRECTION
    assert tracer.max_bounces == MAX_BOUNCES


def test_ray_for():
    camera = build_camera()
    tracer = RayTracer(build_red_scene(), 4, 4)

    ray = tracer.ray_for(2, 1)
    assert torch.equal(ray.origin, camera.origin)
    assert torch.allclose(ray.direction, vector(0, 0, -2))

    # the last row has yt = 0, the top edge of the image plane
    ray = tracer.ray_for(0, 3)
    assert torch.allclose(ray.direction, vector(-2, 2, -2))

    ray = tracer.ray_for(0, 0)
    assert torch.allclose(ray.direction, vector(-2, -1, -2))


def test_silhouette_center_is_red():
    tracer = RayTracer(build_red_scene(), 4, 4, samples_per_direction=1)

    color = tracer.traced_value_at_pixel(2, 1)

    assert color[0] > color[1]
    assert color[0] > color[2]


def test_outside_silhouette_is_black():
    tracer = RayTracer(build_red_scene(), 4, 4)

    assert torch.equal(tracer.traced_value_at_pixel(0, 0), vector(0))
    assert torch.equal(tracer.traced_value_for_ray(Ray(vector(0, 0, 5), vector(0, 3, -1)), 0), vector(0))


def test_empty_scene_is_black():
    scene = Scene(build_camera(), ambient=vector(1), objects=[], lights=[])
    tracer = RayTracer(scene, 4, 4)

    for y in range(4):
        for x in range(4):
            assert torch.equal(tracer.traced_value_at_pixel(x, y), vector(0))


def test_no_bounces_is_direct_shading():
    scene = build_mirror_scene()
    tracer = RayTracer(scene, 4, 4, max_bounces=0)
    ray = Ray(vector(0, 0, 5), vector(0, 0, -1))

    expected = color_at(scene.objects.intersects(ray), scene)

    assert torch.equal(tracer.traced_value_for_ray(ray, 0), expected)


def test_reflection_adds_reflected_color():
    scene = build_mirror_scene()
    ray = Ray(vector(0, 0, 5), vector(0, 0, -1))

    direct = RayTracer(scene, 4, 4, max_bounces=0).traced_value_for_ray(ray, 0)
    reflected = RayTracer(scene, 4, 4, max_bounces=1).traced_value_for_ray(ray, 0)

    assert torch.allclose(direct, vector(0.5, 0, 0))
    assert torch.allclose(reflected, vector(0.5, 0.5, 0))


def test_reflection_is_not_clamped():
    scene = build_mirror_scene()
    mirror, green = scene.objects
    green.material = Material(ka=vector(0), kd=vector(1, 4, 0), ks=vector(0), alpha=10, kr=vector(0))
    mirror.material = Material(ka=vector(0), kd=vector(4, 0, 0), ks=vector(0), alpha=10, kr=vector(3))
    ray = Ray(vector(0, 0, 5), vector(0, 0, -1))

    color = RayTracer(scene, 4, 4, max_bounces=1).traced_value_for_ray(ray, 0)

    # direct shading clamps each surface to 1, the weighted reflection is added on top
    assert torch.allclose(color, vector(1 + 3 * 0.5, 3 * 1, 0))


def test_single_sample_is_unjittered_trace():
    tracer = RayTracer(build_red_scene(), 8, 6, samples_per_direction=1)

    for x, y in [(0, 0), (3, 2), (4, 3), (7, 5)]:
        expected = tracer.traced_value_for_ray(tracer.ray_for(x, y), 0)
        assert torch.equal(tracer.traced_value_at_pixel(x, y), expected)


def test_supersampling_averages():
    tracer = RayTracer(build_red_scene(), 8, 6)

    expected = vector(0)
    for dx in range(2):
        for dy in range(2):
            color = tracer.traced_value_for_ray(tracer.ray_for(3 + dx / 2, 2 + dy / 2), 0)
            expected = add(expected, mul(color, 1 / 4))

    assert torch.allclose(tracer.traced_value_at_pixel(3, 2), expected)


def test_trace_row():
    tracer = RayTracer(build_red_scene(), 4, 4, samples_per_direction=1)

    row = tracer.trace_row(1)

    assert len(row) == 4
    assert torch.equal(row[2], tracer.traced_value_at_pixel(2, 1))
