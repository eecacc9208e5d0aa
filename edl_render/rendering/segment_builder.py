# -*- coding: utf-8 -*-
"""
Construção dos nós de cada corte, independente dos demais cortes
"""

from __future__ import annotations

from ..domain.models.effects import FilterContext
from ..domain.models.graph import (
    CompiledGraph,
    FilterNode,
    FilterOp,
    InputStream,
    NodeRole,
)
from ..domain.models.timeline import FadeConfig
from ..infra.logging import get_logger
from ..infra.plugins import plugin_registry
from .input_resolver import CutInputs

# Registra os efeitos usados abaixo
from ..plugins.builtin.effects import audio_offset, letterbox, volume  # noqa: F401
from ..plugins.builtin.effects import fade as fade_effect  # noqa: F401


class SegmentBuilder:
    """Gera o nó de vídeo e um nó de áudio por input de um corte"""

    def __init__(self, fade: FadeConfig, resolution: tuple[int, int] | None = None):
        self.fade = fade
        self.resolution = resolution
        self.logger = get_logger("SegmentBuilder")

    def build_video(self, graph: CompiledGraph, cut: CutInputs, total_cuts: int) -> int:
        """setpts + letterbox opcional + fades de borda; devolve o índice do nó"""
        ctx = FilterContext("video", cut.duration)
        ops = [FilterOp.of("setpts", "PTS-STARTPTS")]

        if self.resolution:
            width, height = self.resolution
            ops += plugin_registry.apply(
                "letterbox", FilterContext("video", cut.duration, width=width, height=height)
            )

        ops += self._edge_fades(ctx, cut.index, total_cuts)

        return graph.add(
            FilterNode(
                role=NodeRole.SEGMENT_VIDEO,
                kind="video",
                cut=cut.index,
                sources=(InputStream(cut.video_index, "video"),),
                ops=tuple(ops),
            )
        )

    def build_audio(self, graph: CompiledGraph, cut: CutInputs, total_cuts: int) -> list[int]:
        """Um nó por input de áudio: o áudio do vídeo primeiro, depois as trilhas"""
        nodes = []
        for track, input_index in enumerate(cut.audio_indices):
            offset = cut.offsets[track]
            ops = [FilterOp.of("asetpts", "PTS-STARTPTS")]
            ops += plugin_registry.apply(
                "audio_offset", FilterContext("audio", cut.duration, offset=offset)
            )
            ops += plugin_registry.apply(
                "volume", FilterContext("audio", cut.duration, volume=cut.volumes[track])
            )
            # Depois da compensação todas as trilhas duram o mesmo que o corte
            ops += self._edge_fades(FilterContext("audio", cut.duration), cut.index, total_cuts)

            nodes.append(
                graph.add(
                    FilterNode(
                        role=NodeRole.SEGMENT_AUDIO,
                        kind="audio",
                        cut=cut.index,
                        track=track,
                        sources=(InputStream(input_index, "audio"),),
                        ops=tuple(ops),
                    )
                )
            )
        return nodes

    def _edge_fades(self, ctx: FilterContext, index: int, total_cuts: int) -> list[FilterOp]:
        """Fade in só no primeiro corte, fade out só no último (ambos se houver um só)"""
        ops = []
        if index == 0:
            ops += plugin_registry.apply(
                "fade", FilterContext(ctx.kind, ctx.duration, inout="in", length=self.fade.fade_in)
            )
        if index == total_cuts - 1:
            ops += plugin_registry.apply(
                "fade", FilterContext(ctx.kind, ctx.duration, inout="out", length=self.fade.fade_out)
            )
        return ops
