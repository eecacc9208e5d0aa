from abc import ABC, abstractmethod

from ....domain.models.graph import FilterOp


class Transition(ABC):
    """Classe base para transições entre cortes (vídeo via xfade, áudio via acrossfade)."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nome do estilo no xfade (transition=<nome>)."""

    def video_op(self, duration: float, offset: float) -> FilterOp:
        """Operação de vídeo; com duração zero vira concatenação simples."""
        if duration <= 0:
            return FilterOp.of("concat", n=2, v=1, a=0)
        return FilterOp.of("xfade", transition=self.name, duration=duration, offset=offset)

    def audio_op(self, duration: float) -> FilterOp:
        """acrossfade sobrepõe a partir do fim do primeiro input, sem offset."""
        if duration <= 0:
            return FilterOp.of("concat", n=2, v=0, a=1)
        return FilterOp.of("acrossfade", d=duration)
