"""
main.py — Interface CLI: escolhe projeto/episódio, compila a EDL e renderiza
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from edl_render.infra.logging import setup_logging, get_logger
from edl_render.infra.settings import load_settings
from edl_render.infra import project_store
from edl_render.domain.errors import EdlError, RenderError
from edl_render.domain.models.timestamp import format_timestamp
from edl_render.application.services.render_service import (
    RenderService,
    RenderRequest,
)
from edl_render.rendering.runner import Progress
from edl_render.plugins.builtin.transitions.registry import TRANSITIONS


def choose(options: List[str], prompt: str, numbered: bool = True) -> str:
    """Lista as opções e pergunta ao usuário (número ou nome)"""
    if not options:
        raise SystemExit(f"ERRO > Nenhuma opção disponível para: {prompt}")

    for i, option in enumerate(options, start=1):
        print(f"  [{i}] {option}" if numbered else f"  {option}")

    answer = input(f"{prompt} > ").strip()
    if answer in options:
        return answer
    # Sem numeração a resposta é sempre o próprio id (ids de episódio costumam ser números)
    if numbered and answer.isdigit() and 1 <= int(answer) <= len(options):
        return options[int(answer) - 1]
    raise SystemExit(f"ERRO > Opção inválida: {answer}")


def print_progress(progress: Progress):
    percent = progress.percent or 0.0
    sys.stdout.write(
        f"\rExportando > {percent:.1f}% "
        f"({format_timestamp(progress.out_time)} / {format_timestamp(progress.total or 0)})"
    )
    sys.stdout.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Renderiza um episódio a partir da EDL (config.json) usando FFmpeg."
    )
    parser.add_argument("--config", default="config.json", help="Arquivo de configuração da aplicação")
    parser.add_argument("--projects-dir", help="Diretório com os projetos")
    parser.add_argument("--project", help="Projeto (diretório) a renderizar")
    parser.add_argument("--episode", help="Id do episódio dentro do projeto")
    parser.add_argument("--output", help="Arquivo de saída (padrão: <episódio>/output.mp4)")
    parser.add_argument(
        "--transition",
        choices=sorted(TRANSITIONS),
        help="Estilo do crossfade de vídeo (padrão: fade)",
    )
    parser.add_argument(
        "--encoder",
        choices=["h264_nvenc", "hevc_nvenc", "libx264", "libx265"],
        help="Encoder de vídeo (padrão: h264_nvenc)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Só mostra o comando FFmpeg")
    parser.add_argument("--no-script", action="store_true", help="Ignora o script.py do projeto")
    parser.add_argument("--no-copy", action="store_true", help="Não salva cópia da EDL junto da saída")
    parser.add_argument("--log-level", help="Nível de log (DEBUG, INFO...)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = load_settings(
        Path(args.config),
        projects_directory=args.projects_dir,
        transition=args.transition,
        vcodec=args.encoder,
        log_level=args.log_level,
    )
    setup_logging(settings.log_file, getattr(logging, settings.log_level.upper(), logging.INFO))
    logger = get_logger("main")

    root = Path(settings.projects_directory or ".")

    project_name = args.project
    if not project_name:
        print("Projetos disponíveis:")
        project_name = choose(project_store.list_projects(root), "Escolha o diretório do projeto")

    episode = args.episode
    if not episode:
        print("Episódios disponíveis:")
        episode = choose(
            project_store.list_episodes(root, project_name),
            "Informe o id do episódio",
            numbered=False,
        )

    try:
        project = project_store.load_project(root, project_name, episode)
        transform = None if args.no_script else project_store.find_transform(root, project_name)
    except (OSError, ValueError, AttributeError) as e:
        logger.error("Falha ao carregar o projeto: %s", e)
        print(f"ERRO > {e}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else project.base_dir / settings.output_name
    request = RenderRequest(
        project=project,
        output_path=output,
        settings=settings.render_settings(),
        transition=settings.transition,
        transform=transform,
        timeout=settings.render_timeout,
        dry_run=args.dry_run,
    )

    service = RenderService()
    try:
        result = service.render(
            request,
            on_start=lambda cmd_line: print(f"Exportando vídeo > \n{cmd_line}"),
            on_progress=print_progress,
        )
    except EdlError as e:
        logger.error("Compilação falhou: %s", e)
        print(f"ERRO > {e}", file=sys.stderr)
        return 1
    except RenderError as e:
        logger.error("Renderização falhou: %s", e)
        print(f"\nErro > {e}", file=sys.stderr)
        return 1

    if not result.executed:
        print(" ".join(result.command))
        return 0

    if not args.no_copy:
        project_store.save_project_copy(project, output.with_suffix(".json"))

    print(f"\nRenderização completa > Salvo em {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
