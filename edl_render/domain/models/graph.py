# -*- coding: utf-8 -*-
"""
Grafo de filtros compilado: nós alocados em arena, arestas por índice
e rótulos gerados apenas na serialização para o FFmpeg
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Literal, Sequence, Union

StreamKind = Literal["video", "audio"]


@dataclass(frozen=True)
class InputStream:
    """Stream de saída de um decodificador de input ([i:v] / [i:a])"""

    input_index: int
    kind: StreamKind

    @property
    def label(self) -> str:
        return f"{self.input_index}:{'v' if self.kind == 'video' else 'a'}"


# Uma fonte é um stream de input ou o índice de um nó da arena
Source = Union[InputStream, int]


def format_value(value: Any) -> str:
    """Formata parâmetros numéricos sem zeros à direita (8.0 -> '8')"""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(value, ".6f").rstrip("0").rstrip(".")
    return str(value)


@dataclass(frozen=True)
class FilterOp:
    """Operação nomeada com parâmetros em ordem (ex.: fade=t=in:st=0:d=2)"""

    name: str
    params: tuple[tuple[str | None, Any], ...] = ()

    @classmethod
    def of(cls, name: str, *positional: Any, **params: Any) -> "FilterOp":
        items = tuple((None, value) for value in positional) + tuple(params.items())
        return cls(name, items)

    def param(self, key: str, default: Any = None) -> Any:
        for name, value in self.params:
            if name == key:
                return value
        return default

    def to_string(self) -> str:
        if not self.params:
            return self.name
        args = ":".join(
            format_value(value) if key is None else f"{key}={format_value(value)}"
            for key, value in self.params
        )
        return f"{self.name}={args}"


class NodeRole(Enum):
    SEGMENT_VIDEO = "v{cut}"
    SEGMENT_AUDIO = "a{cut}_{track}"
    MIX = "a{cut}"
    VIDEO_XFADE = "vxf{cut}"
    AUDIO_XFADE = "axf{cut}"


@dataclass(frozen=True)
class FilterNode:
    """Passo de processamento; o rótulo depende só de (papel, corte, trilha)"""

    role: NodeRole
    kind: StreamKind
    cut: int
    sources: tuple[Source, ...]
    ops: tuple[FilterOp, ...]
    track: int = 0

    @property
    def label(self) -> str:
        return self.role.value.format(cut=self.cut, track=self.track)

    def op_names(self) -> list[str]:
        return [op.name for op in self.ops]

    def find_op(self, name: str, **match: Any) -> FilterOp | None:
        """Primeira operação com o nome (e parâmetros) informados"""
        for op in self.ops:
            if op.name == name and all(op.param(k) == v for k, v in match.items()):
                return op
        return None


@dataclass(frozen=True)
class ResolvedInput:
    """Janela de leitura de um arquivo de mídia (um slot de input do FFmpeg)"""

    source_id: str
    path: Path
    kind: StreamKind
    read_start: float
    read_duration: float
    cut: int
    track: int = 0


@dataclass
class CompiledGraph:
    """Resultado da compilação: inputs, nós em ordem, rótulos terminais e duração"""

    inputs: list[ResolvedInput] = field(default_factory=list)
    nodes: list[FilterNode] = field(default_factory=list)
    video_out: int | None = None
    audio_out: int | None = None
    durations: list[int] = field(default_factory=list)
    crossfade: float = 0
    total_duration: float = 0

    def add(self, node: FilterNode) -> int:
        """Adiciona um nó à arena e devolve seu índice"""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def label_of(self, source: Source) -> str:
        if isinstance(source, InputStream):
            return source.label
        return self.nodes[source].label

    def expression(self, node: FilterNode) -> str:
        """Serializa um nó no formato [in][in]op,op[out]"""
        sources = "".join(f"[{self.label_of(src)}]" for src in node.sources)
        chain = ",".join(op.to_string() for op in node.ops)
        return f"{sources}{chain}[{node.label}]"

    def to_filters(self) -> list[str]:
        return [self.expression(node) for node in self.nodes]

    def to_filter_complex(self) -> str:
        return ";".join(self.to_filters())

    @property
    def labels(self) -> list[str]:
        return [node.label for node in self.nodes]

    @property
    def terminal_labels(self) -> tuple[str, str]:
        """(vídeo, áudio) a serem mapeados no container de saída"""
        return self.label_of(self.video_out), self.label_of(self.audio_out)

    @property
    def video_inputs(self) -> list[ResolvedInput]:
        return [item for item in self.inputs if item.kind == "video"]

    @property
    def audio_inputs(self) -> list[ResolvedInput]:
        return [item for item in self.inputs if item.kind == "audio"]

    def nodes_for_cut(self, cut: int, role: NodeRole | None = None) -> list[FilterNode]:
        return [
            node
            for node in self.nodes
            if node.cut == cut and (role is None or node.role == role)
        ]

    def progress_fraction(self, mark_seconds: float) -> float:
        return progress_fraction(mark_seconds, self.total_duration)

    def progress_percent(self, mark_seconds: float) -> float:
        return 100.0 * self.progress_fraction(mark_seconds)


def transition_offset(durations: Sequence[float], crossfade: float, index: int) -> float:
    """Início do crossfade do corte `index` na timeline já composta

    Cada emenda anterior sobrepõe `crossfade` segundos, então o desconto
    cresce linearmente com o índice.
    """
    return sum(durations[:index]) - crossfade * index


def total_duration(durations: Sequence[float], crossfade: float) -> float:
    """Duração final: soma dos cortes menos as N-1 sobreposições"""
    if not durations:
        return 0
    return sum(durations) - crossfade * (len(durations) - 1)


def progress_fraction(mark_seconds: float, total: float) -> float:
    """Fração [0, 1] do tempo de saída já produzido pelo encoder"""
    if total <= 0:
        raise ValueError("Duração total deve ser positiva")
    return min(1.0, max(0.0, mark_seconds / total))
