from raytracer.ray import Ray
from raytracer.scene import Scene
from raytracer.shading import color_at
from raytracer.vector import add, mul, neg, normalize, reflect, vector

NUM_SAMPLES_PER_DIRECTION = 2
MAX_BOUNCES = 3
REFLECTION_OFFSET = 0.01


class RayTracer(object):
    def __init__(
        self,
        scene: Scene,
        width,
        height,
        samples_per_direction=NUM_SAMPLES_PER_DIRECTION,
        max_bounces=MAX_BOUNCES,
    ):
        self.scene = scene
        self.width = width
        self.height = height
        self.samples_per_direction = samples_per_direction
        self.max_bounces = max_bounces

    def traced_value_at_pixel(self, x, y):
        n = self.samples_per_direction
        weight = 1 / (n * n)

        color = vector()
        for dx in range(n):
            for dy in range(n):
                ray = self.ray_for(x + dx / n, y + dy / n)
                color = add(color, mul(self.traced_value_for_ray(ray, 0), weight))

        return color

    def ray_for(self, x, y):
        xt = x / self.width
        yt = (self.height - y - 1) / self.height

        return self.scene.camera.ray_to_position(xt, yt)

    def traced_value_for_ray(self, ray: Ray, depth):
        intersection = self.scene.objects.intersects(ray)
        if intersection is None:
            return vector()

        color = color_at(intersection, self.scene)

        if depth < self.max_bounces:
            reflected = Ray(
                add(intersection.point, mul(intersection.normal, REFLECTION_OFFSET)),
                reflect(normalize(neg(ray.direction)), intersection.normal),
            )
            reflected = self.traced_value_for_ray(reflected, depth + 1)
            # not clamped, channels may exceed 1 until conversion to bytes
            color = add(color, mul(reflected, intersection.object.material.kr))

        return color

    def trace_row(self, y):
        return [self.traced_value_at_pixel(x, y) for x in range(self.width)]
