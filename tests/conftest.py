# -*- coding: utf-8 -*-
"""
Fixtures compartilhadas: projetos de exemplo e verificação de existência falsa
"""

import logging
from pathlib import Path

import pytest

from edl_render.domain.models.timeline import AudioTrack, Cut, FadeConfig, Project, VideoRef


def always_exists(base_dir: Path, relative_id: str) -> bool:
    return True


def make_cut(video="a.mp4", start="00:00:00", end="00:00:10", audio=None, volume=1.0) -> Cut:
    return Cut(video=VideoRef(video, volume), start=start, end=end, audio=list(audio or []))


@pytest.fixture(autouse=True)
def reset_root_handlers():
    """setup_logging adiciona handlers ao logger raiz; remove os criados no teste"""
    root = logging.getLogger()
    before = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def two_cut_project() -> Project:
    """Dois cortes de 10s e 8s com crossfade de 2s"""
    return Project(
        cuts=[
            make_cut("a.mp4", "00:00:00", "00:00:10"),
            make_cut("b.mp4", "00:01:00", "00:01:08"),
        ],
        fade=FadeConfig(fade_in=1, fade_out=2, crossfade=2),
        base_dir=Path("/projetos/show/ep1"),
    )


@pytest.fixture
def voiced_project() -> Project:
    """Um corte com narração atrasada e música adiantada"""
    return Project(
        cuts=[
            make_cut(
                "cam.mp4",
                "00:00:10",
                "00:00:30",
                audio=[
                    AudioTrack("voice.wav", 1.5, "00:00:02"),
                    AudioTrack("music.mp3", 0.25, "-00:00:03"),
                ],
                volume=0.5,
            )
        ],
        fade=FadeConfig(fade_in=1, fade_out=1),
        base_dir=Path("/projetos/show/ep2"),
    )
