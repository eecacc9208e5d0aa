# -*- coding: utf-8 -*-
"""
Execução de comandos FFmpeg com progresso
"""

import subprocess
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..domain.errors import InvalidTimestamp, RenderError
from ..domain.models.graph import progress_fraction
from ..domain.models.timestamp import parse_progress_mark
from ..infra.logging import get_logger


@dataclass(frozen=True)
class Progress:
    """Representa o progresso de renderização"""

    out_time: float  # segundos de saída já produzidos
    speed: Optional[float]
    percent: Optional[float]
    frame: Optional[int] = None
    fps: Optional[float] = None
    bitrate: Optional[str] = None
    total: Optional[float] = None  # duração total esperada, quando conhecida


class Runner:
    """Executa comandos FFmpeg com monitoramento de progresso"""

    def __init__(self):
        self.logger = get_logger("Runner")

    def run(
        self,
        cmd: List[str],
        on_progress: Optional[Callable[[Progress], None]] = None,
        total_duration: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> subprocess.CompletedProcess:
        """Executa comando FFmpeg com callback de progresso e timeout opcional"""
        self.logger.info("Executando comando FFmpeg: %s", " ".join(map(str, cmd)))

        # O arquivo de saída precisa continuar sendo o último argumento
        cmd_with_progress = cmd[:-1] + ["-progress", "pipe:1", "-nostats", cmd[-1]]

        process = subprocess.Popen(
            cmd_with_progress,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )

        # stderr drenado em paralelo para o FFmpeg não travar com o pipe cheio
        stderr_lines: List[str] = []
        stderr_thread = threading.Thread(
            target=self._drain, args=(process.stderr, stderr_lines), daemon=True
        )
        stderr_thread.start()

        stdout_lines: List[str] = []
        block: Dict[str, str] = {}
        start_time = time.time()

        try:
            for raw in process.stdout:
                line = raw.strip()
                if not line:
                    continue
                stdout_lines.append(line)

                if timeout and (time.time() - start_time) > timeout:
                    self._terminate(process)
                    raise RenderError(f"Comando FFmpeg excedeu timeout de {timeout}s")

                key, sep, value = line.partition("=")
                if not sep:
                    continue
                block[key] = value
                # Cada bloco do -progress termina em progress=continue|end
                if key == "progress":
                    progress = self._parse_progress_block(block, total_duration)
                    block = {}
                    if progress and on_progress:
                        on_progress(progress)

            return_code = process.wait()
        finally:
            # Com o processo encerrado o stderr chega ao EOF e a thread termina
            stderr_thread.join(timeout=5)
            process.stdout.close()
            process.stderr.close()

        stderr = "".join(stderr_lines)

        if return_code != 0:
            self.logger.error(
                "Comando FFmpeg retornou código %d. Stderr: %s", return_code, stderr
            )
            raise RenderError(stderr.strip() or f"FFmpeg retornou código {return_code}", return_code)

        self.logger.info("Comando FFmpeg finalizado com sucesso.")
        return subprocess.CompletedProcess(
            args=cmd,
            returncode=return_code,
            stdout="\n".join(stdout_lines),
            stderr=stderr,
        )

    @staticmethod
    def _drain(stream, sink: List[str]) -> None:
        for line in stream:
            sink.append(line)

    def _terminate(self, process: subprocess.Popen) -> None:
        self.logger.error("Timeout excedido, terminando processo")
        process.terminate()
        try:
            process.wait(timeout=5)
        except subprocess.TimeoutExpired:
            self.logger.error("Processo não terminou graciosamente, forçando...")
            process.kill()
            process.wait()

    def _parse_progress_block(
        self, data: Dict[str, str], total_duration: Optional[float] = None
    ) -> Optional[Progress]:
        """Parseia um bloco key=value do -progress; marcas ilegíveis são ignoradas"""
        mark = data.get("out_time")
        if not mark:
            return None

        try:
            out_time = parse_progress_mark(mark)
        except InvalidTimestamp:
            self.logger.debug("Marca de progresso ignorada: %s", mark)
            return None

        percent = None
        if total_duration:
            percent = 100.0 * progress_fraction(out_time, total_duration)

        return Progress(
            out_time=out_time,
            speed=_to_float(data.get("speed", "").rstrip("x")),
            percent=percent,
            frame=_to_int(data.get("frame")),
            fps=_to_float(data.get("fps")),
            bitrate=data.get("bitrate"),
            total=total_duration,
        )


def _to_float(value: Optional[str]) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_int(value: Optional[str]) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
