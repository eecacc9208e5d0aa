from .base import Transition


class SmoothLeftTransition(Transition):
    name = "smoothleft"
