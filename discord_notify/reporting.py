"""Canais de diagnóstico: cada reporter expõe warning(msg) e notice(msg)."""
import logging
import sys
from typing import List

logger = logging.getLogger(__name__)


class LoggingReporter:
    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def warning(self, msg: str):
        self.log.warning(msg)

    def notice(self, msg: str):
        self.log.info(msg)


def _escape_command_data(msg: str) -> str:
    # Mesmo escape usado pelo @actions/core para workflow commands
    return str(msg).replace('%', '%25').replace('\r', '%0D').replace('\n', '%0A')


class ActionsReporter:
    """Emite workflow commands do GitHub Actions (::warning:: / ::notice::)."""

    def __init__(self, stream=None):
        self.stream = stream

    def _emit(self, command: str, msg: str):
        stream = self.stream or sys.stdout
        stream.write(f"::{command}::{_escape_command_data(msg)}\n")
        stream.flush()

    def warning(self, msg: str):
        self._emit('warning', msg)

    def notice(self, msg: str):
        self._emit('notice', msg)


class CollectingReporter(LoggingReporter):
    """Guarda as mensagens para devolver ao chamador (ex.: resposta HTTP)."""

    def __init__(self, log: logging.Logger = logger):
        super().__init__(log)
        self.warnings: List[str] = []
        self.notices: List[str] = []

    def warning(self, msg: str):
        self.warnings.append(msg)
        super().warning(msg)

    def notice(self, msg: str):
        self.notices.append(msg)
        super().notice(msg)
