import logging

import torch
from torchvision.transforms.functional import to_pil_image

from raytracer.vector import floor, mul

logger = logging.getLogger(__name__)


def to_rgb(color):
    """Converts a [0, 1] color to 0-255 channels, saturating out of range values."""

    color = floor(mul(color, 255))
    color = torch.nan_to_num(color, nan=0.0).clamp(0, 255)
    r, g, b = color.to(torch.uint8).tolist()

    return r, g, b


class Canvas(object):
    """RGBA pixel buffer, fully opaque.

    Pixels are stored flat in row-major order, the pixel (x, y) starts at
    (y * width + x) * 4. Whatever `present` is given receives the
    (height, width, 4) image.
    """

    def __init__(self, width, height, present=None):
        self.width = width
        self.height = height
        self.pixels = torch.zeros(width * height * 4, dtype=torch.uint8)
        self._present = present

    def set_pixel(self, x, y, color):
        offset = (y * self.width + x) * 4
        self.pixels[offset : offset + 3] = torch.tensor(to_rgb(color), dtype=torch.uint8)
        self.pixels[offset + 3] = 255

    def set_row(self, y, colors):
        for x, color in enumerate(colors):
            self.set_pixel(x, y, color)

    def image(self):
        return self.pixels.view(self.height, self.width, 4)

    def present(self):
        if self._present is not None:
            self._present(self.image())


class ImageFile(object):
    def __init__(self, path):
        self.path = path

    def __call__(self, image):
        image = to_pil_image(image.permute(2, 0, 1), mode="RGBA")
        image.save(self.path)
        logger.debug("saved %s", self.path)
