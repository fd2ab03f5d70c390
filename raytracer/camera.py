from raytracer.ray import Ray
from raytracer.vector import lerp, sub


class Camera(object):
    def __init__(self, origin, top_left, top_right, bottom_left, bottom_right):
        self.origin = origin
        self.top_left = top_left
        self.top_right = top_right
        self.bottom_left = bottom_left
        self.bottom_right = bottom_right

    def ray_to_position(self, x, y):
        top = lerp(self.top_left, self.top_right, x)
        bottom = lerp(self.bottom_left, self.bottom_right, x)
        position = lerp(top, bottom, y)

        return Ray(self.origin, sub(position, self.origin))
