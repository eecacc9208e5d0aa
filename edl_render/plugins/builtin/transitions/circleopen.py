from .base import Transition


class CircleOpenTransition(Transition):
    name = "circleopen"
