# -*- coding: utf-8 -*-
"""
Escala para caber na resolução alvo e centraliza com barras (letterbox)
"""

from ....infra.plugins import effect
from ....domain.models.effects import FilterContext
from ....domain.models.graph import FilterOp


@effect(
    name="letterbox",
    params={"width": "int>0", "height": "int>0"},
    target="video",
    description="Normaliza todos os cortes para o mesmo tamanho de quadro",
)
class LetterboxEffect:
    def build_ops(self, ctx: FilterContext) -> list[FilterOp]:
        width = ctx.params["width"]
        height = ctx.params["height"]
        return [
            FilterOp.of("scale", width, height, force_original_aspect_ratio="decrease"),
            FilterOp.of("pad", width, height, "(ow-iw)/2", "(oh-ih)/2"),
            # xfade exige o mesmo SAR nos dois lados
            FilterOp.of("setsar", 1),
        ]
