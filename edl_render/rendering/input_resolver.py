# -*- coding: utf-8 -*-
"""
Resolução dos inputs do FFmpeg: um slot por arquivo referenciado em cada corte
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ..domain.errors import InvalidCut, MissingSource
from ..domain.models.graph import ResolvedInput
from ..domain.models.timeline import Cut, Project
from ..domain.models.timestamp import to_seconds
from ..infra.logging import get_logger

ExistsFn = Callable[[Path, str], bool]


def file_exists(base_dir: Path, relative_id: str) -> bool:
    """Verificação padrão de existência no sistema de arquivos"""
    return (Path(base_dir) / relative_id).exists()


@dataclass(frozen=True)
class CutInputs:
    """Inputs de um corte: o vídeo primeiro, depois as trilhas extras em ordem"""

    index: int
    duration: int
    video_index: int
    audio_indices: tuple[int, ...]  # inclui o áudio embutido do vídeo na posição 0
    offsets: tuple[int, ...]
    volumes: tuple[float, ...]


class InputResolver:
    """Mapeia cada corte para as janelas de leitura dos seus arquivos"""

    def __init__(self, exists: ExistsFn | None = None):
        self.exists = exists or file_exists
        self.logger = get_logger("InputResolver")

    def resolve(self, project: Project) -> tuple[list[ResolvedInput], list[CutInputs]]:
        """Resolve todos os cortes em ordem; o primeiro erro aborta tudo"""
        inputs: list[ResolvedInput] = []
        cuts: list[CutInputs] = []

        for i, cut in enumerate(project.cuts):
            cuts.append(self._resolve_cut(project.base_dir, i, cut, inputs))

        self.logger.info(
            "Resolvidos %d inputs para %d cortes", len(inputs), len(cuts)
        )
        return inputs, cuts

    def _resolve_cut(
        self, base_dir: Path, index: int, cut: Cut, inputs: list[ResolvedInput]
    ) -> CutInputs:
        if not cut.video or not cut.video.source_id:
            raise InvalidCut(index, "video.id ausente")

        start = to_seconds(cut.start)
        end = to_seconds(cut.end)
        duration = end - start
        if duration <= 0:
            raise InvalidCut(index, "fim deve ser depois do início")
        if cut.video.volume < 0:
            raise InvalidCut(index, "volume do vídeo não pode ser negativo")

        if not self.exists(base_dir, cut.video.source_id):
            raise MissingSource(index, "vídeo", cut.video.source_id)

        video_index = len(inputs)
        inputs.append(
            ResolvedInput(
                source_id=cut.video.source_id,
                path=Path(base_dir) / cut.video.source_id,
                kind="video",
                read_start=start,
                read_duration=duration,
                cut=index,
            )
        )

        audio_indices = [video_index]
        offsets = [0]
        volumes = [cut.video.volume]

        for track_number, track in enumerate(cut.audio, start=1):
            if not track.source_id:
                raise InvalidCut(index, f"trilha de áudio {track_number} sem id")
            if track.volume < 0:
                raise InvalidCut(index, f"volume da trilha {track.source_id} não pode ser negativo")
            if not self.exists(base_dir, track.source_id):
                raise MissingSource(index, "áudio", track.source_id)

            offset = to_seconds(track.offset) if track.offset else 0
            # Offset positivo lê menos (o resto vira silêncio); negativo lê a
            # mais para depois cortar o início. A trilha sempre fecha em `duration`.
            read_duration = duration - offset
            if read_duration <= 0:
                raise InvalidCut(
                    index, f"offset de {track.source_id} maior que a duração do corte"
                )

            audio_indices.append(len(inputs))
            offsets.append(offset)
            volumes.append(track.volume)
            inputs.append(
                ResolvedInput(
                    source_id=track.source_id,
                    path=Path(base_dir) / track.source_id,
                    kind="audio",
                    read_start=start,
                    read_duration=read_duration,
                    cut=index,
                    track=track_number,
                )
            )

        self.logger.debug(
            "Corte %d: %ss a partir de %ss, %d trilhas de áudio",
            index,
            duration,
            start,
            len(audio_indices),
        )
        return CutInputs(
            index=index,
            duration=duration,
            video_index=video_index,
            audio_indices=tuple(audio_indices),
            offsets=tuple(offsets),
            volumes=tuple(volumes),
        )
