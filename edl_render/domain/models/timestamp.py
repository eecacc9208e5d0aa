# -*- coding: utf-8 -*-
"""
Conversão de timestamps HH:MM:SS para segundos
"""

from __future__ import annotations
import re
from typing import Union

from ..errors import InvalidTimestamp

Timestamp = Union[str, int]

# Horas com dois ou mais dígitos, minutos e segundos sempre com dois
_TIMESTAMP_RE = re.compile(r"^(-)?(\d{2,}):(\d{2}):(\d{2})$")
# Marcas de progresso do FFmpeg: out_time=00:01:02.345678
_PROGRESS_RE = re.compile(r"^(-)?(\d+):(\d{1,2}):(\d{1,2}(?:\.\d+)?)$")


def parse_timestamp(text: str) -> int:
    """Converte '[-]HH:MM:SS' em segundos inteiros (o sinal vale para o valor todo)"""
    if not isinstance(text, str):
        raise InvalidTimestamp(f"Timestamp deve ser texto HH:MM:SS, recebido {text!r}")

    match = _TIMESTAMP_RE.match(text.strip())
    if not match:
        raise InvalidTimestamp(f"Timestamp deve ser HH:MM:SS: {text!r}")

    sign, hours, minutes, seconds = match.groups()
    if int(minutes) >= 60 or int(seconds) >= 60:
        raise InvalidTimestamp(f"Minutos/segundos fora do intervalo 00-59: {text!r}")

    total = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    return -total if sign else total


def parse_progress_mark(text: str) -> float:
    """Converte a marca de tempo do FFmpeg ('HH:MM:SS.frac') em segundos"""
    match = _PROGRESS_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise InvalidTimestamp(f"Marca de progresso inválida: {text!r}")

    sign, hours, minutes, seconds = match.groups()
    total = int(hours) * 3600 + int(minutes) * 60 + float(seconds)
    return -total if sign else total


def to_seconds(value: Timestamp) -> int:
    """Aceita segundos já numéricos ou um timestamp em texto"""
    if isinstance(value, bool):
        raise InvalidTimestamp(f"Timestamp inválido: {value!r}")
    if isinstance(value, int):
        return value
    return parse_timestamp(value)


def format_timestamp(seconds: float) -> str:
    """Formata segundos como [-]HH:MM:SS (usado em logs e no progresso)"""
    sign = "-" if seconds < 0 else ""
    total = int(abs(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
