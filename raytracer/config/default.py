from raytracer.camera import Camera
from raytracer.light import Light
from raytracer.material import Material
from raytracer.objects import Sphere
from raytracer.scene import Scene
from raytracer.settings import Config, Settings
from raytracer.vector import vector

config = Config(
    scene=Scene(
        camera=Camera(
            origin=vector(0, 0, 2),
            top_left=vector(-1.28, 0.86, -0.5),
            top_right=vector(1.28, 0.86, -0.5),
            bottom_left=vector(-1.28, -0.86, -0.5),
            bottom_right=vector(1.28, -0.86, -0.5),
        ),
        ambient=0.5,
        objects=[
            Sphere(
                vector(-1.1, 0.6, -1),
                0.2,
                Material(
                    ka=vector(0.1, 0.1, 0.1),
                    kd=vector(0.5, 0.5, 0.9),
                    ks=vector(0.7, 0.7, 0.7),
                    alpha=20,
                    kr=vector(0.1, 0.1, 0.2),
                ),
            ),
            Sphere(
                vector(0.2, -0.1, -1),
                0.5,
                Material(
                    ka=vector(0.1, 0.1, 0.1),
                    kd=vector(0.9, 0.5, 0.5),
                    ks=vector(0.7, 0.7, 0.7),
                    alpha=20,
                    kr=vector(0.2, 0.1, 0.1),
                ),
            ),
            Sphere(
                vector(1.2, -0.5, -1.75),
                0.4,
                Material(
                    ka=vector(0.1, 0.1, 0.1),
                    kd=vector(0.1, 0.5, 0.1),
                    ks=vector(0.7, 0.7, 0.7),
                    alpha=20,
                    kr=vector(0.8, 0.9, 0.8),
                ),
            ),
        ],
        lights=[
            Light(position=vector(-3, -0.5, 1), diffuse=vector(0.8, 0.3, 0.3), specular=vector(0.8, 0.8, 0.8)),
            Light(position=vector(3, 2, 1), diffuse=vector(0.4, 0.4, 0.9), specular=vector(0.8, 0.8, 0.8)),
        ],
    ),
    settings=Settings(width=1024, height=768, samples_per_direction=2, max_bounces=3),
)
