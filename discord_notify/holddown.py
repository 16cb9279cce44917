import logging
import time
from typing import Callable, Optional

from .constants import NOTIFY_HOLDDOWN_SECONDS

logger = logging.getLogger(__name__)


class HolddownState:
    """
    Timestamp do último envio tentado (sucesso ou falha), por processo.
    Começa vazio; não há persistência entre execuções.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.last_attempt: Optional[float] = None

    def touch(self):
        self.last_attempt = self.clock()

    def elapsed(self) -> Optional[float]:
        if self.last_attempt is None:
            return None
        return self.clock() - self.last_attempt

    def remaining(self, interval: float) -> float:
        elapsed = self.elapsed()
        if elapsed is None:
            return 0.0
        return max(0.0, interval - elapsed)

    def reset(self):
        self.last_attempt = None


def wait_for_holddown(state: HolddownState, interval: float = NOTIFY_HOLDDOWN_SECONDS,
                      sleep: Callable[[float], None] = time.sleep) -> float:
    """Bloqueia até o intervalo mínimo desde o último envio. Retorna o tempo esperado."""
    remaining = state.remaining(interval)
    if remaining > 0:
        logger.debug(f"Holddown ativo: aguardando {remaining:.2f}s antes do próximo envio")
        sleep(remaining)
    return remaining


# Estado compartilhado pelos hosts (Flask/CLI) durante a vida do processo
default_holddown_state = HolddownState()
