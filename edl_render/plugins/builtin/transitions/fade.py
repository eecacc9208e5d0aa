from .base import Transition


class FadeTransition(Transition):
    # Exemplo: xfade=transition=fade:duration=1:offset=5
    name = "fade"
