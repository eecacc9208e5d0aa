# -*- coding: utf-8 -*-
"""
Modelos de efeitos aplicados aos nós de segmento
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Mapping, Protocol

from .graph import FilterOp, StreamKind


@dataclass(frozen=True)
class EffectDescriptor:
    """Descritor de um efeito disponível no sistema"""

    name: str
    params: Mapping[str, str]  # nome_param: tipo_validacao
    target: Literal["video", "audio", "both"]
    description: str = ""


class FilterContext:
    """Contexto para construção das operações de um nó"""

    def __init__(self, kind: StreamKind, duration: float, **kwargs):
        self.kind = kind
        self.duration = duration
        self.params = kwargs


class Effect(Protocol):
    """Interface para implementação de efeitos"""

    def build_ops(self, ctx: FilterContext) -> list[FilterOp]:
        """Constrói as operações FFmpeg deste efeito (lista vazia = nada a fazer)"""
        ...
