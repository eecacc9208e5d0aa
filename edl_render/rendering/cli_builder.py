# -*- coding: utf-8 -*-
"""
Construção de comandos FFmpeg a partir do filtergraph compilado
"""

from pathlib import Path
from typing import List

from ..domain.models.graph import CompiledGraph, format_value
from ..domain.models.timeline import RenderSettings
from ..infra.logging import get_logger


class CliBuilder:
    """Constrói comandos FFmpeg a partir do filtergraph"""

    def __init__(self):
        self.logger = get_logger("CliBuilder")

    def make_command(
        self, graph: CompiledGraph, out_path: Path, settings: RenderSettings
    ) -> List[str]:
        """Gera o comando FFmpeg completo"""
        self.logger.info("Construindo comando FFmpeg para %d inputs", len(graph.inputs))

        cmd = [settings.ffmpeg_path, "-y"]

        # Hardware acceleration primeiro, se especificado
        if settings.hwaccel:
            cmd.extend(["-hwaccel", settings.hwaccel])

        # Cada input lê só a sua janela
        for item in graph.inputs:
            cmd.extend(
                [
                    "-ss",
                    format_value(float(item.read_start)),
                    "-t",
                    format_value(float(item.read_duration)),
                    "-i",
                    str(item.path),
                ]
            )

        cmd.extend(["-filter_complex", graph.to_filter_complex()])

        # Mapear outputs do filtergraph
        video_label, audio_label = graph.terminal_labels
        cmd.extend(["-map", f"[{video_label}]", "-map", f"[{audio_label}]"])

        # Configurações de codec de vídeo
        cmd.extend(["-c:v", settings.vcodec])
        if settings.is_nvenc:
            cmd.extend(["-preset", settings.video_preset, "-cq", str(settings.cq)])
        else:
            cmd.extend(["-preset", settings.video_preset, "-crf", str(settings.cq)])

        cmd.extend(["-pix_fmt", settings.pix_fmt, "-r", str(settings.framerate)])

        # Codec de áudio
        cmd.extend(["-c:a", settings.acodec, "-b:a", settings.audio_bitrate])

        cmd.append("-shortest")

        # Arquivo de saída
        cmd.append(str(out_path))

        self.logger.debug("Comando FFmpeg: %s", " ".join(map(str, cmd)))
        return cmd
