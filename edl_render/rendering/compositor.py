# -*- coding: utf-8 -*-
"""
Mixagem do áudio de cada corte e encadeamento dos cortes com crossfades
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Sequence

from ..domain.errors import CompilationError
from ..domain.models.graph import CompiledGraph, FilterNode, FilterOp, NodeRole
from ..infra.logging import get_logger
from ..plugins.builtin.transitions.base import Transition
from ..plugins.builtin.transitions.registry import get_transition


@dataclass(frozen=True)
class Segment:
    """Nós prontos de um corte: vídeo e áudio já mixado"""

    index: int
    duration: float
    video: int
    audio: int


@dataclass(frozen=True)
class CompositeState:
    """Acumulador da composição: últimos streams compostos e tempo já somado"""

    video: int
    audio: int
    elapsed: float


def mix_cut_audio(graph: CompiledGraph, cut_index: int, audio_nodes: Sequence[int]) -> int:
    """Soma sem normalização; o volume de cada trilha já foi aplicado antes"""
    if not audio_nodes:
        raise CompilationError(f"Corte {cut_index} sem nenhum nó de áudio para mixar")

    return graph.add(
        FilterNode(
            role=NodeRole.MIX,
            kind="audio",
            cut=cut_index,
            sources=tuple(audio_nodes),
            ops=(FilterOp.of("amix", inputs=len(audio_nodes), normalize=0),),
        )
    )


class Compositor:
    """Encadeia os segmentos com xfade (vídeo) e acrossfade (áudio)"""

    def __init__(self, crossfade: float, transition: Transition | str | None = None):
        self.crossfade = crossfade
        if isinstance(transition, Transition):
            self.transition = transition
        else:
            self.transition = get_transition(transition)
        self.logger = get_logger("Compositor")

    def compose(self, graph: CompiledGraph, segments: Sequence[Segment]) -> CompositeState:
        """Dobra os segmentos em (vídeo, áudio, tempo acumulado)"""
        if not segments:
            raise CompilationError("Nenhum segmento para compor")

        first = segments[0]
        initial = CompositeState(first.video, first.audio, first.duration)
        return reduce(
            lambda state, segment: self._join(graph, state, segment),
            segments[1:],
            initial,
        )

    def _join(self, graph: CompiledGraph, state: CompositeState, segment: Segment) -> CompositeState:
        # Cada emenda anterior já consumiu `crossfade` segundos da timeline
        offset = state.elapsed - self.crossfade * segment.index

        video = graph.add(
            FilterNode(
                role=NodeRole.VIDEO_XFADE,
                kind="video",
                cut=segment.index,
                sources=(state.video, segment.video),
                ops=(self.transition.video_op(self.crossfade, offset),),
            )
        )
        audio = graph.add(
            FilterNode(
                role=NodeRole.AUDIO_XFADE,
                kind="audio",
                cut=segment.index,
                sources=(state.audio, segment.audio),
                ops=(self.transition.audio_op(self.crossfade),),
            )
        )
        self.logger.debug(
            "Transição %s no corte %d: offset=%s duração=%s",
            self.transition.name,
            segment.index,
            offset,
            self.crossfade,
        )
        return CompositeState(video, audio, state.elapsed + segment.duration)
