from .base import Transition
from .fade import FadeTransition
from .fadeblack import FadeBlackTransition
from .smoothleft import SmoothLeftTransition
from .circleopen import CircleOpenTransition
from .zoomin import ZoomInTransition

TRANSITIONS = {
    "fade": FadeTransition(),
    "fadeblack": FadeBlackTransition(),
    "smoothleft": SmoothLeftTransition(),
    "circleopen": CircleOpenTransition(),
    "zoomin": ZoomInTransition(),
}


def get_transition(name: str | None) -> Transition:
    return TRANSITIONS.get(name or "fade", TRANSITIONS["fade"])
