from .base import Transition


class FadeBlackTransition(Transition):
    """Passa pelo preto entre os dois cortes"""

    name = "fadeblack"
