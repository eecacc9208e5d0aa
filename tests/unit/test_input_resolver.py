# -*- coding: utf-8 -*-
"""
Testes unitários para a resolução de inputs
"""

from pathlib import Path

import pytest

from edl_render.domain.errors import InvalidCut, InvalidTimestamp, MissingSource
from edl_render.domain.models.timeline import AudioTrack, Project
from edl_render.rendering.input_resolver import InputResolver, file_exists

from conftest import always_exists, make_cut


def test_video_then_audio_slots(voiced_project):
    """Vídeo ocupa o primeiro slot, depois cada trilha em ordem"""
    inputs, cuts = InputResolver(always_exists).resolve(voiced_project)

    assert [item.source_id for item in inputs] == ["cam.mp4", "voice.wav", "music.mp3"]
    assert [item.kind for item in inputs] == ["video", "audio", "audio"]
    assert inputs[0].path == Path("/projetos/show/ep2/cam.mp4")

    cut = cuts[0]
    assert cut.duration == 20
    assert cut.video_index == 0
    assert cut.audio_indices == (0, 1, 2)
    assert cut.offsets == (0, 2, -3)
    assert cut.volumes == (0.5, 1.5, 0.25)


def test_audio_read_window_compensates_offset(voiced_project):
    """Offset positivo lê menos, negativo lê mais; ambos fecham na duração do corte"""
    inputs, _ = InputResolver(always_exists).resolve(voiced_project)

    video, voice, music = inputs
    assert (video.read_start, video.read_duration) == (10, 20)
    assert (voice.read_start, voice.read_duration) == (10, 18)
    assert (music.read_start, music.read_duration) == (10, 23)


def test_slots_are_numbered_across_cuts(two_cut_project):
    inputs, cuts = InputResolver(always_exists).resolve(two_cut_project)

    assert [cut.video_index for cut in cuts] == [0, 1]
    assert [item.cut for item in inputs] == [0, 1]
    assert inputs[1].read_start == 60
    assert inputs[1].read_duration == 8


@pytest.mark.parametrize("end", ["00:00:10", "00:00:05"])
def test_end_not_after_start_is_invalid(end):
    """fim <= início sempre falha com InvalidCut"""
    project = Project(cuts=[make_cut(start="00:00:10", end=end)])

    with pytest.raises(InvalidCut) as exc:
        InputResolver(always_exists).resolve(project)
    assert exc.value.index == 0


def test_missing_video_id_is_invalid():
    project = Project(cuts=[make_cut(video="")])

    with pytest.raises(InvalidCut):
        InputResolver(always_exists).resolve(project)


def test_negative_volume_is_invalid():
    project = Project(cuts=[make_cut(volume=-1)])

    with pytest.raises(InvalidCut):
        InputResolver(always_exists).resolve(project)


def test_offset_longer_than_cut_is_invalid():
    project = Project(cuts=[make_cut(audio=[AudioTrack("voice.wav", 1.0, "00:00:10")])])

    with pytest.raises(InvalidCut):
        InputResolver(always_exists).resolve(project)


def test_bad_timestamp_propagates():
    project = Project(cuts=[make_cut(start="0:0:0")])

    with pytest.raises(InvalidTimestamp):
        InputResolver(always_exists).resolve(project)


def test_first_invalid_cut_aborts_in_order():
    """O primeiro corte inválido na ordem da lista é o reportado"""
    project = Project(
        cuts=[
            make_cut(),
            make_cut(start="00:00:05", end="00:00:01"),
            make_cut(video=""),
        ]
    )

    with pytest.raises(InvalidCut) as exc:
        InputResolver(always_exists).resolve(project)
    assert exc.value.index == 1


def test_missing_source_uses_collaborator():
    """A única fonte de MissingSource é o retorno False do colaborador"""
    checked = []

    def exists(base_dir, relative_id):
        checked.append((base_dir, relative_id))
        return relative_id != "voice.wav"

    project = Project(
        cuts=[make_cut(audio=[AudioTrack("voice.wav")])],
        base_dir=Path("/base"),
    )

    with pytest.raises(MissingSource) as exc:
        InputResolver(exists).resolve(project)

    assert exc.value.source_id == "voice.wav"
    assert exc.value.index == 0
    assert checked == [(Path("/base"), "a.mp4"), (Path("/base"), "voice.wav")]


def test_file_exists_default(tmp_path):
    (tmp_path / "a.mp4").write_bytes(b"")

    assert file_exists(tmp_path, "a.mp4")
    assert not file_exists(tmp_path, "b.mp4")
