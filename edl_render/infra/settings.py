# -*- coding: utf-8 -*-
"""
Settings management using pydantic-settings
"""

import json
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from ..domain.models.timeline import RenderSettings


class AppSettings(BaseSettings):
    """Configurações da aplicação"""

    projects_directory: str = ""
    ffmpeg_path: Optional[str] = None
    transition: str = "fade"
    output_name: str = "output.mp4"
    render_timeout: Optional[float] = None
    log_file: str = "edl_render.log"
    log_level: str = "INFO"

    # Encoder (padrões: NVENC p3, cq 18, 60 fps, AAC 320k); sem preset usa o da família do encoder
    vcodec: str = "h264_nvenc"
    preset: Optional[str] = None
    cq: int = 18
    pix_fmt: str = "yuv420p"
    framerate: int = 60
    acodec: str = "aac"
    audio_bitrate: str = "320k"
    hwaccel: Optional[str] = None

    class Config:
        env_prefix = "EDL_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def render_settings(self) -> RenderSettings:
        """Configurações de encoder para o CliBuilder"""
        from .paths import ffmpeg_bin

        return RenderSettings(
            vcodec=self.vcodec,
            preset=self.preset,
            cq=self.cq,
            pix_fmt=self.pix_fmt,
            framerate=self.framerate,
            acodec=self.acodec,
            audio_bitrate=self.audio_bitrate,
            hwaccel=self.hwaccel,
            ffmpeg_path=ffmpeg_bin(self.ffmpeg_path),
        )


def load_settings(config_path: Path = Path("config.json"), **overrides) -> AppSettings:
    """Carrega as configurações da aplicação"""
    # Primeiro tenta carregar do config.json (compatibilidade)
    config_data = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = json.load(f)

    # Senão carrega das variáveis de ambiente ou padrões
    config_data.update({k: v for k, v in overrides.items() if v is not None})
    return AppSettings(**config_data)
