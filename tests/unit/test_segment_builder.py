# -*- coding: utf-8 -*-
"""
Testes unitários para os nós de segmento (vídeo e áudio por corte)
"""

from edl_render.domain.models.graph import CompiledGraph, FilterOp
from edl_render.domain.models.timeline import FadeConfig
from edl_render.rendering.input_resolver import CutInputs
from edl_render.rendering.segment_builder import SegmentBuilder


def make_inputs(index=0, duration=10, offsets=(0,), volumes=(1.0,)):
    return CutInputs(
        index=index,
        duration=duration,
        video_index=0,
        audio_indices=tuple(range(len(offsets))),
        offsets=tuple(offsets),
        volumes=tuple(volumes),
    )


class TestVideoNode:
    """Testes para o nó de vídeo"""

    def test_first_cut_fades_in_only(self):
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(1, 2)).build_video(graph, make_inputs(0), 3)

        assert graph.expression(graph.nodes[node]) == "[0:v]setpts=PTS-STARTPTS,fade=t=in:st=0:d=1[v0]"

    def test_last_cut_fades_out_only(self):
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(1, 2)).build_video(graph, make_inputs(2, 8), 3)

        assert graph.nodes[node].op_names() == ["setpts", "fade"]
        assert graph.nodes[node].find_op("fade", t="out", st=6, d=2) is not None

    def test_middle_cut_has_no_fades(self):
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(1, 2)).build_video(graph, make_inputs(1), 3)

        assert graph.nodes[node].op_names() == ["setpts"]

    def test_single_cut_fades_both_ways(self):
        """Primeiro e último ao mesmo tempo: fade in e fade out"""
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(1, 2)).build_video(graph, make_inputs(0, 10), 1)

        ops = graph.nodes[node].ops
        assert ops[1] == FilterOp.of("fade", t="in", st=0, d=1)
        assert ops[2] == FilterOp.of("fade", t="out", st=8, d=2)

    def test_fade_out_longer_than_cut_starts_at_zero(self):
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(0, 5)).build_video(graph, make_inputs(0, 3), 1)

        assert graph.nodes[node].find_op("fade", t="out", st=0, d=5) is not None

    def test_zero_fades_are_omitted(self):
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig()).build_video(graph, make_inputs(0), 1)

        assert graph.nodes[node].op_names() == ["setpts"]

    def test_letterbox_before_fades(self):
        """Com resolução alvo, escala e pad vêm antes dos fades"""
        graph = CompiledGraph()
        node = SegmentBuilder(FadeConfig(1, 1), (1920, 1080)).build_video(graph, make_inputs(0), 1)

        assert graph.expression(graph.nodes[node]) == (
            "[0:v]setpts=PTS-STARTPTS,"
            "scale=1920:1080:force_original_aspect_ratio=decrease,"
            "pad=1920:1080:(ow-iw)/2:(oh-ih)/2,setsar=1,"
            "fade=t=in:st=0:d=1,fade=t=out:st=9:d=1[v0]"
        )


class TestAudioNodes:
    """Testes para os nós de áudio"""

    def test_one_node_per_input(self):
        graph = CompiledGraph()
        nodes = SegmentBuilder(FadeConfig()).build_audio(
            graph, make_inputs(offsets=(0, 0, 0), volumes=(1.0, 1.0, 1.0)), 1
        )

        assert [graph.nodes[n].label for n in nodes] == ["a0_0", "a0_1", "a0_2"]
        assert [graph.label_of(graph.nodes[n].sources[0]) for n in nodes] == ["0:a", "1:a", "2:a"]

    def test_video_audio_only(self):
        """Sem trilhas extras ainda existe o áudio do próprio vídeo"""
        graph = CompiledGraph()
        nodes = SegmentBuilder(FadeConfig()).build_audio(graph, make_inputs(), 1)

        assert len(nodes) == 1
        assert graph.expression(graph.nodes[nodes[0]]) == "[0:a]asetpts=PTS-STARTPTS,volume=1[a0_0]"

    def test_negative_offset_trims_head(self):
        graph = CompiledGraph()
        nodes = SegmentBuilder(FadeConfig()).build_audio(
            graph, make_inputs(offsets=(0, -3), volumes=(1.0, 0.25)), 2
        )

        assert graph.expression(graph.nodes[nodes[1]]) == (
            "[1:a]asetpts=PTS-STARTPTS,atrim=start=3,asetpts=PTS-STARTPTS,volume=0.25[a0_1]"
        )

    def test_positive_offset_pads_head(self):
        """Atraso vira silêncio no início via areverse/apad/areverse"""
        graph = CompiledGraph()
        nodes = SegmentBuilder(FadeConfig()).build_audio(
            graph, make_inputs(offsets=(0, 2), volumes=(1.0, 1.5)), 2
        )

        assert graph.nodes[nodes[1]].op_names() == [
            "asetpts",
            "areverse",
            "apad",
            "areverse",
            "volume",
        ]
        assert graph.nodes[nodes[1]].find_op("apad", pad_dur=2) is not None

    def test_every_audio_node_gets_edge_fades(self):
        graph = CompiledGraph()
        nodes = SegmentBuilder(FadeConfig(1, 2)).build_audio(
            graph, make_inputs(duration=20, offsets=(0, 2, -3), volumes=(1.0, 1.0, 1.0)), 1
        )

        for n in nodes:
            node = graph.nodes[n]
            assert node.find_op("afade", t="in", st=0, d=1) is not None
            assert node.find_op("afade", t="out", st=18, d=2) is not None
