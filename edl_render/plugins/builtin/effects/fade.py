# -*- coding: utf-8 -*-
"""
Efeito de fade para as bordas da timeline (vídeo e áudio)
"""

from ....infra.plugins import effect
from ....domain.models.effects import FilterContext
from ....domain.models.graph import FilterOp


@effect(
    name="fade",
    params={"length": "float>=0", "inout": "'in'|'out'"},
    target="both",
    description="Aplica fade in no início ou fade out no fim do segmento",
)
class FadeEffect:
    """Efeito de fade para entrada ou saída"""

    def build_ops(self, ctx: FilterContext) -> list[FilterOp]:
        length = ctx.params.get("length", 0)
        inout = ctx.params.get("inout", "in")

        # d=0 faz o FFmpeg cair no padrão de frames/amostras, então não emitir
        if length <= 0:
            return []

        start = 0 if inout == "in" else max(0, ctx.duration - length)
        name = "fade" if ctx.kind == "video" else "afade"
        return [FilterOp.of(name, t=inout, st=start, d=length)]
