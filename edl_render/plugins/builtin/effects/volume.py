# -*- coding: utf-8 -*-
"""
Multiplicador de volume de uma trilha
"""

from ....infra.plugins import effect
from ....domain.models.effects import FilterContext
from ....domain.models.graph import FilterOp


@effect(
    name="volume",
    params={"volume": "float>=0"},
    target="audio",
    description="Multiplica a amplitude da trilha (1.0 = original)",
)
class VolumeEffect:
    def build_ops(self, ctx: FilterContext) -> list[FilterOp]:
        return [FilterOp.of("volume", ctx.params.get("volume", 1.0))]
