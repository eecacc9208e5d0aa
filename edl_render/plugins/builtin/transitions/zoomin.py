from .base import Transition


class ZoomInTransition(Transition):
    # O filtro xfade do ffmpeg suporta 'zoomin' como tipo de transição
    name = "zoomin"
