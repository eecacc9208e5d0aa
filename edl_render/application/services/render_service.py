# -*- coding: utf-8 -*-
"""
edl_render/application/services/render_service.py
Serviço de renderização: compila a EDL e entrega o grafo ao FFmpeg
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from ...domain.models.graph import CompiledGraph
from ...domain.models.timeline import Project, RenderSettings
from ...infra.logging import get_logger
from ...rendering.cli_builder import CliBuilder
from ...rendering.graph_builder import GraphBuilder, ProjectTransform
from ...rendering.input_resolver import ExistsFn
from ...rendering.runner import Progress, Runner


@dataclass
class RenderRequest:
    """Requisição de renderização de um projeto"""

    project: Project
    output_path: Path
    settings: RenderSettings
    transition: Optional[str] = None
    transform: Optional[ProjectTransform] = None
    timeout: Optional[float] = None
    dry_run: bool = False


@dataclass
class RenderResult:
    """Resultado: comando executado, grafo compilado e arquivo de saída"""

    output_path: Path
    command: List[str]
    graph: CompiledGraph
    executed: bool


class RenderService:
    """Orquestra compilação, montagem do comando e execução"""

    def __init__(
        self,
        runner: Optional[Runner] = None,
        exists: Optional[ExistsFn] = None,
    ):
        self.logger = get_logger("RenderService")
        self.runner = runner or Runner()
        self.cli_builder = CliBuilder()
        self.exists = exists

    def compile(self, request: RenderRequest) -> CompiledGraph:
        builder = GraphBuilder(exists=self.exists, transition=request.transition)
        return builder.build(request.project, transform=request.transform)

    def render(
        self,
        request: RenderRequest,
        on_start: Optional[Callable[[str], None]] = None,
        on_progress: Optional[Callable[[Progress], None]] = None,
    ) -> RenderResult:
        """Renderiza o projeto; erros de compilação acontecem antes do FFmpeg"""
        self.logger.info("Iniciando renderização: saída=%s", request.output_path)

        graph = self.compile(request)
        cmd = self.cli_builder.make_command(graph, request.output_path, request.settings)

        if request.dry_run:
            self.logger.info("Dry run: comando não executado")
            return RenderResult(request.output_path, cmd, graph, executed=False)

        if on_start:
            on_start(" ".join(cmd))

        self.runner.run(
            cmd,
            on_progress=on_progress,
            total_duration=graph.total_duration,
            timeout=request.timeout,
        )

        self.logger.info("Renderização concluída: %s", request.output_path)
        return RenderResult(request.output_path, cmd, graph, executed=True)
