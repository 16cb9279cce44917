import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .constants import DEFAULT_AVATAR_URL, DEFAULT_USERNAME, LONG_SEVERITY, SEVERITY_COLORS
from .flags import MessageFlags, parse_flags
from .inputs import input_text

logger = logging.getLogger(__name__)


def normalize_severity(raw_severity: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Retorna (severidade, diagnostico). Severidade desconhecida é tratada como ausente.

    Exemplos:
        ' Error ' -> ('error', None)
        'critical' -> (None, "Unknown severity 'critical' ...")
    """
    if raw_severity is None or not raw_severity.strip():
        return None, None
    severity = raw_severity.strip().lower()
    if severity not in LONG_SEVERITY:
        allowed = ", ".join(LONG_SEVERITY)
        return None, f"Unknown severity '{raw_severity.strip()}' (expected one of: {allowed}). Severity ignored."
    return severity, None


def build_embed(title: Optional[str], description: Optional[str], severity: Optional[str], fields: List[Dict]) -> Dict:
    embed: Dict = {}
    # Título explícito tem prioridade sobre o rótulo longo da severidade
    if title:
        embed["title"] = title
    elif severity:
        embed["title"] = LONG_SEVERITY[severity]
    if description:
        embed["description"] = description
    if severity:
        embed["color"] = SEVERITY_COLORS[severity]
    if fields:
        embed["fields"] = [dict(f) for f in fields]
    embed["timestamp"] = datetime.now(timezone.utc).isoformat()
    return embed


def build_message(inputs, fields: List[Dict], severity: Optional[str], flags: Optional[MessageFlags] = None) -> Dict:
    """
    Monta o payload do webhook (formato da API do Discord) a partir dos inputs já validados.

    - content só entra quando 'text' não é vazio
    - embed é criado se houver title, description, severidade ou fields,
      exceto com SuppressEmbeds (nesse caso tudo isso é descartado)
    - SuppressNotifications/IsComponentsV2 não alteram o payload aqui; seguem
      como flags para o transporte
    """
    if flags is None:
        flags = parse_flags(inputs.get('flags'))

    text = input_text(inputs, 'text')
    title = input_text(inputs, 'title')
    description = input_text(inputs, 'description')

    payload: Dict = {
        "username": input_text(inputs, 'username') or DEFAULT_USERNAME,
        "avatar_url": input_text(inputs, 'avatarUrl') or DEFAULT_AVATAR_URL,
    }
    if text:
        payload["content"] = text

    wants_embed = bool(title or description or severity or fields)
    if wants_embed and flags & MessageFlags.SuppressEmbeds:
        logger.debug("SuppressEmbeds ativo: title/description/severity/fields descartados")
    elif wants_embed:
        payload["embeds"] = [build_embed(title, description, severity, fields)]

    return payload
