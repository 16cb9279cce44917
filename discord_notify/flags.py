import enum
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class MessageFlags(enum.IntFlag):
    """Flags de mensagem aceitas pelo webhook do Discord (valores de bit da API)."""

    NONE = 0
    SuppressEmbeds = 1 << 2
    SuppressNotifications = 1 << 12
    IsComponentsV2 = 1 << 15


def parse_flag(token: str) -> MessageFlags:
    # Token desconhecido vira NONE (no-op), sem erro
    member = MessageFlags.__members__.get(token)
    if member is None:
        logger.debug(f"Flag desconhecida ignorada: '{token}'")
        return MessageFlags.NONE
    return member


def parse_flags(raw_flags: Optional[str]) -> MessageFlags:
    """
    Converte a lista de tokens separados por espaço em MessageFlags.

    Exemplos:
        'SuppressEmbeds IsComponentsV2' -> SuppressEmbeds | IsComponentsV2
        'NonExistantFlag' -> NONE
    """
    flags = MessageFlags.NONE
    for token in (raw_flags or '').split():
        flags |= parse_flag(token)
    return flags
