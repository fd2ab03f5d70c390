import logging
from functools import partial
from multiprocessing import Pool

from tqdm import tqdm

from raytracer.canvas import Canvas
from raytracer.tracer import RayTracer

logger = logging.getLogger(__name__)


def render(tracer: RayTracer, canvas: Canvas, workers=1, cancel=None, progress=True):
    """Traces every row of the image into `canvas` in raster order.

    With `workers` > 1 rows are traced in a process pool, rows still reach
    the canvas top to bottom. `cancel` is an optional `threading.Event`,
    checked between rows. The canvas is presented once at the end, including
    after a cancellation. Returns the number of finished rows.
    """

    logger.info(
        "rendering %dx%d, %d samples per pixel, %d bounces, %d workers",
        tracer.width,
        tracer.height,
        tracer.samples_per_direction**2,
        tracer.max_bounces,
        workers,
    )

    if workers > 1:
        with Pool(workers) as pool:
            rows = draw_rows(
                pool.imap(partial(render_row, tracer=tracer), range(tracer.height)),
                tracer,
                canvas,
                cancel,
                progress,
            )
    else:
        rows = draw_rows(
            map(partial(render_row, tracer=tracer), range(tracer.height)),
            tracer,
            canvas,
            cancel,
            progress,
        )

    canvas.present()

    if rows < tracer.height:
        logger.info("render cancelled after %d of %d rows", rows, tracer.height)
    else:
        logger.info("render finished")

    return rows


def draw_rows(rows, tracer: RayTracer, canvas: Canvas, cancel, progress):
    rows = iter(rows)

    done = 0
    with tqdm(total=tracer.height, disable=not progress) as pbar:
        for y in range(tracer.height):
            if cancel is not None and cancel.is_set():
                break

            canvas.set_row(y, next(rows))
            logger.debug("row %d done", y)
            done += 1
            pbar.update()

    return done


def render_row(y, tracer: RayTracer):
    return tracer.trace_row(y)
