# -*- coding: utf-8 -*-
"""
Construção de filtergraph FFmpeg a partir da EDL
"""

from __future__ import annotations
from typing import Callable, Optional

from ..domain.errors import EmptyTimeline, InvalidFade
from ..domain.models.graph import (
    CompiledGraph,
    progress_fraction,
    total_duration,
    transition_offset,
)
from ..domain.models.timeline import Project
from ..infra.logging import get_logger
from ..plugins.builtin.transitions.base import Transition
from .compositor import Compositor, Segment, mix_cut_audio
from .input_resolver import ExistsFn, InputResolver
from .segment_builder import SegmentBuilder

__all__ = [
    "GraphBuilder",
    "ProjectTransform",
    "progress_fraction",
    "total_duration",
    "transition_offset",
]

ProjectTransform = Callable[[Project], Project]


class GraphBuilder:
    """Compila um projeto em grafo de filtros, inputs e duração total"""

    def __init__(
        self,
        exists: Optional[ExistsFn] = None,
        transition: Transition | str | None = None,
    ):
        self.logger = get_logger("GraphBuilder")
        self.resolver = InputResolver(exists)
        self.transition = transition

    def build(self, project: Project, transform: Optional[ProjectTransform] = None) -> CompiledGraph:
        """Constrói o grafo; qualquer corte inválido aborta sem grafo parcial"""
        if transform is not None:
            project = transform(project)
            self.logger.info("Transformação aplicada ao projeto antes da compilação")

        if not project.cuts:
            raise EmptyTimeline("Projeto precisa de pelo menos um corte")

        fade = project.fade
        for name, value in (("in", fade.fade_in), ("out", fade.fade_out), ("crossfade", fade.crossfade)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidFade(f"fade_duration.{name} deve ser um número: {value!r}")
            if value < 0:
                raise InvalidFade(f"fade_duration.{name} não pode ser negativo: {value}")

        self.logger.info(
            "Construindo filtergraph para %d cortes (fade in=%s out=%s crossfade=%s)",
            len(project.cuts),
            fade.fade_in,
            fade.fade_out,
            fade.crossfade,
        )

        inputs, cuts = self.resolver.resolve(project)
        durations = [cut.duration for cut in cuts]

        total = total_duration(durations, fade.crossfade)
        if total <= 0:
            raise InvalidFade(
                f"Crossfade de {fade.crossfade}s consome toda a timeline ({sum(durations)}s)"
            )
        if len(cuts) > 1 and fade.crossfade > min(durations):
            self.logger.warning(
                "Crossfade de %ss maior que o corte mais curto (%ss)",
                fade.crossfade,
                min(durations),
            )

        graph = CompiledGraph(inputs=inputs, durations=durations, crossfade=fade.crossfade)
        segment_builder = SegmentBuilder(fade, project.resolution)

        segments = []
        for cut in cuts:
            video = segment_builder.build_video(graph, cut, len(cuts))
            audio_nodes = segment_builder.build_audio(graph, cut, len(cuts))
            audio = mix_cut_audio(graph, cut.index, audio_nodes)
            segments.append(Segment(cut.index, cut.duration, video, audio))

        final = Compositor(fade.crossfade, self.transition).compose(graph, segments)

        graph.video_out = final.video
        graph.audio_out = final.audio
        graph.total_duration = total

        self.logger.info(
            "Filtergraph com %d nós, saída [%s][%s], duração total %ss",
            len(graph.nodes),
            *graph.terminal_labels,
            total,
        )
        self.logger.debug("Filtergraph construído: %s", graph.to_filter_complex())
        return graph
