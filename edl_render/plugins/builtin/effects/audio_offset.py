# -*- coding: utf-8 -*-
"""
Compensação de offset de uma trilha de áudio
"""

from ....infra.plugins import effect
from ....domain.models.effects import FilterContext
from ....domain.models.graph import FilterOp


@effect(
    name="audio_offset",
    params={"offset": "int"},
    target="audio",
    description="Adianta (offset negativo) ou atrasa (offset positivo) a trilha",
)
class AudioOffsetEffect:
    """Offset negativo corta o início; positivo insere silêncio no início.

    O silêncio é gerado com areverse + apad + areverse, sem fonte extra.
    """

    def build_ops(self, ctx: FilterContext) -> list[FilterOp]:
        offset = ctx.params.get("offset", 0)
        if offset < 0:
            return [
                FilterOp.of("atrim", start=abs(offset)),
                FilterOp.of("asetpts", "PTS-STARTPTS"),
            ]
        if offset > 0:
            return [
                FilterOp.of("areverse"),
                FilterOp.of("apad", pad_dur=offset),
                FilterOp.of("areverse"),
            ]
        return []
