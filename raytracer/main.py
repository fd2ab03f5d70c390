import logging
import os

import click
import matplotlib.pyplot as plt

from raytracer.canvas import Canvas, ImageFile
from raytracer.render import render
from raytracer.scene import validate_scene
from raytracer.settings import load_config
from raytracer.tracer import RayTracer

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "default.py")


@click.command()
@click.option("--config-path", type=click.Path(exists=True, dir_okay=False), default=DEFAULT_CONFIG_PATH)
@click.option("--width", type=click.INT)
@click.option("--height", type=click.INT)
@click.option("--samples", type=click.INT, help="Samples per pixel along each axis")
@click.option("--bounces", type=click.INT, help="Number of times a ray can be reflected")
@click.option("--workers", type=click.INT)
@click.option("--output-path", type=click.Path(dir_okay=False))
@click.option("--show", is_flag=True)
def main(config_path, width, height, samples, bounces, workers, output_path, show):
    logging.basicConfig(level=logging.INFO)

    try:
        config = load_config(
            config_path,
            width=width,
            height=height,
            samples_per_direction=samples,
            max_bounces=bounces,
            workers=workers,
            output_path=output_path,
        )
        validate_scene(config.scene)
    except ValueError as e:
        raise click.ClickException(str(e))

    settings = config.settings
    logging.info("loaded config from %s", config_path)

    tracer = RayTracer(
        config.scene,
        settings.width,
        settings.height,
        samples_per_direction=settings.samples_per_direction,
        max_bounces=settings.max_bounces,
    )

    output_dir = os.path.dirname(settings.output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    canvas = Canvas(settings.width, settings.height, present=ImageFile(settings.output_path))

    render(tracer, canvas, workers=settings.workers)
    logging.info("saved image to %s", settings.output_path)

    if show:
        plt.imshow(canvas.image().numpy())
        plt.show()


if __name__ == "__main__":
    main()
