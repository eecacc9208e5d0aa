# -*- coding: utf-8 -*-
"""
Modelos de domínio para a lista de decisões de edição (EDL):
projeto, cortes, trilhas de áudio, fades e configurações de renderização
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from ..errors import InvalidResolution
from .timestamp import Timestamp


@dataclass(frozen=True)
class FadeConfig:
    """Durações de fade in/out e crossfade em segundos"""

    fade_in: float = 0
    fade_out: float = 0
    crossfade: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "FadeConfig":
        data = data or {}
        return cls(
            fade_in=data.get("in") or 0,
            fade_out=data.get("out") or 0,
            crossfade=data.get("crossfade") or 0,
        )

    def to_dict(self) -> dict:
        return {"in": self.fade_in, "out": self.fade_out, "crossfade": self.crossfade}


@dataclass(frozen=True)
class AudioTrack:
    """Trilha de áudio extra de um corte"""

    source_id: str
    volume: float = 1.0
    offset: Timestamp = 0  # positivo atrasa, negativo adianta

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AudioTrack":
        volume = data.get("volume")
        return cls(
            source_id=data.get("id") or "",
            volume=1.0 if volume is None else volume,
            offset=data.get("offset") or 0,
        )

    def to_dict(self) -> dict:
        result = {"id": self.source_id, "volume": self.volume}
        if self.offset:
            result["offset"] = self.offset
        return result


@dataclass(frozen=True)
class VideoRef:
    """Vídeo principal de um corte (a trilha de áudio embutida usa o mesmo volume)"""

    source_id: str
    volume: float = 1.0


@dataclass(frozen=True)
class Cut:
    """Um segmento da timeline de saída"""

    video: VideoRef
    start: Timestamp
    end: Timestamp
    audio: list[AudioTrack] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Cut":
        video = data.get("video") or {}
        volume = video.get("volume")

        # Áudio ausente ou malformado vira lista vazia
        audio = data.get("audio")
        if not isinstance(audio, list):
            audio = []

        return cls(
            video=VideoRef(
                source_id=video.get("id") or "",
                volume=1.0 if volume is None else volume,
            ),
            start=data.get("start", ""),
            end=data.get("end", ""),
            audio=[AudioTrack.from_dict(track) for track in audio if isinstance(track, Mapping)],
        )

    def to_dict(self) -> dict:
        return {
            "video": {"id": self.video.source_id, "volume": self.video.volume},
            "start": self.start,
            "end": self.end,
            "audio": [track.to_dict() for track in self.audio],
        }


@dataclass(frozen=True)
class Project:
    """Projeto (EDL) completo: cortes em ordem, fades e resolução opcional"""

    cuts: list[Cut]
    fade: FadeConfig = field(default_factory=FadeConfig)
    resolution: tuple[int, int] | None = None
    base_dir: Path = Path(".")
    directory: str | None = None
    episode_id: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base_dir: Path = Path(".")) -> "Project":
        """Lê o formato persistido em config.json"""
        cuts = data.get("cuts")
        if not isinstance(cuts, list):
            cuts = []

        return cls(
            cuts=[Cut.from_dict(cut) for cut in cuts],
            fade=FadeConfig.from_dict(data.get("fade_duration")),
            resolution=_parse_resolution(data.get("resolution")),
            base_dir=Path(base_dir),
            directory=data.get("directory"),
            episode_id=data.get("id"),
        )

    def to_dict(self) -> dict:
        result = {
            "cuts": [cut.to_dict() for cut in self.cuts],
            "fade_duration": self.fade.to_dict(),
        }
        if self.resolution:
            result["resolution"] = list(self.resolution)
        return result


def _parse_resolution(value: Any) -> tuple[int, int] | None:
    """Aceita [w, h] ou 'WxH'"""
    if not value:
        return None
    try:
        if isinstance(value, str):
            width, _, height = value.lower().partition("x")
        else:
            width, height = value
        size = int(width), int(height)
    except (TypeError, ValueError):
        raise InvalidResolution(f"Resolução inválida: {value!r}") from None

    if size[0] <= 0 or size[1] <= 0:
        raise InvalidResolution(f"Resolução inválida: {value!r}")
    return size


@dataclass(frozen=True)
class RenderSettings:
    """Configurações de renderização"""

    container: str = "mp4"
    vcodec: str = "h264_nvenc"  # "libx264" | "h264_nvenc" | "hevc_nvenc" | "libx265"
    preset: str | None = None  # None = padrão da família do encoder
    cq: int = 18
    pix_fmt: str = "yuv420p"
    framerate: int = 60
    acodec: str = "aac"
    audio_bitrate: str = "320k"
    hwaccel: str | None = None  # "cuda"|"qsv"|"vaapi"|None
    ffmpeg_path: str = "ffmpeg"

    @property
    def is_nvenc(self) -> bool:
        return "nvenc" in self.vcodec

    @property
    def video_preset(self) -> str:
        """Preset explícito ou o padrão do encoder (NVENC usa p1..p7, x264/x265 nomes)"""
        if self.preset:
            return self.preset
        return "p3" if self.is_nvenc else "medium"
