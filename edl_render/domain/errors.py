# -*- coding: utf-8 -*-
"""
Erros de domínio da compilação de EDL e da execução do FFmpeg
"""

from __future__ import annotations


class EdlError(Exception):
    """Erro base para falhas detectadas durante a compilação"""


class InvalidTimestamp(EdlError, ValueError):
    """Timestamp fora do formato HH:MM:SS"""


class InvalidCut(EdlError):
    """Corte inválido (fim <= início, vídeo ausente, volume negativo...)"""

    def __init__(self, index: int, reason: str):
        super().__init__(f"Corte {index}: {reason}")
        self.index = index
        self.reason = reason


class InvalidFade(EdlError):
    """Duração de fade/crossfade negativa"""


class MissingSource(EdlError, FileNotFoundError):
    """Arquivo de mídia referenciado não encontrado"""

    def __init__(self, index: int, kind: str, source_id: str):
        super().__init__(f"Corte {index}: {kind} não encontrado → {source_id}")
        self.index = index
        self.kind = kind
        self.source_id = source_id


class InvalidResolution(EdlError, ValueError):
    """Resolução fora do formato WxH ou [w, h]"""


class EmptyTimeline(EdlError):
    """Projeto sem cortes"""


class CompilationError(EdlError):
    """Violação de invariante interna do compilador"""


class RenderError(RuntimeError):
    """Falha reportada pelo FFmpeg (stderr repassado sem alterações)"""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode
