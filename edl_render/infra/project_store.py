# -*- coding: utf-8 -*-
"""
Acesso aos projetos em disco: <projects_directory>/<projeto>/<episódio>/config.json
"""

import importlib.util
import json
from pathlib import Path
from typing import Callable, List, Optional

from ..domain.models.timeline import Project
from .logging import get_logger

CONFIG_NAME = "config.json"
SCRIPT_NAME = "script.py"

logger = get_logger("ProjectStore")


def list_projects(root: Path) -> List[str]:
    """Diretórios de projeto disponíveis, em ordem alfabética"""
    return sorted(entry.name for entry in Path(root).iterdir() if entry.is_dir())


def list_episodes(root: Path, project: str) -> List[str]:
    """Episódios do projeto que possuem config.json"""
    project_dir = Path(root) / project
    return sorted(
        entry.name
        for entry in project_dir.iterdir()
        if entry.is_dir() and (entry / CONFIG_NAME).exists()
    )


def episode_dir(root: Path, project: str, episode: str) -> Path:
    return Path(root) / project / episode


def load_project(root: Path, project: str, episode: str) -> Project:
    """Lê o config.json do episódio; caminhos de mídia são relativos a ele"""
    base_dir = episode_dir(root, project, episode)
    config_path = base_dir / CONFIG_NAME

    with open(config_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    # Scripts customizados recebem diretório e id junto com a EDL
    data.setdefault("directory", project)
    data.setdefault("id", episode)

    loaded = Project.from_dict(data, base_dir=base_dir)
    logger.info("Projeto %s/%s carregado com %d cortes", project, episode, len(loaded.cuts))
    return loaded


def save_project_copy(project: Project, path: Path) -> Path:
    """Grava uma cópia da EDL usada na renderização, para referência"""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(project.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info("Cópia da configuração salva em %s", path)
    return path


def find_transform(root: Path, project: str) -> Optional[Callable[[Project], Project]]:
    """Carrega <projeto>/script.py e devolve sua função transform(project), se houver"""
    script_path = Path(root) / project / SCRIPT_NAME
    if not script_path.exists():
        return None

    spec = importlib.util.spec_from_file_location(f"edl_script_{project}", script_path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    transform = getattr(module, "transform", None)
    if not callable(transform):
        raise AttributeError(f"{script_path} não define transform(project)")

    logger.info("Script customizado encontrado: %s", script_path)
    return transform
