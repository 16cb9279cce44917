import json
import logging
from typing import Dict, List, Optional, Tuple

from .constants import MAX_EMBED_FIELDS

logger = logging.getLogger(__name__)

TOO_MANY_FIELDS = "Discord only supports up to 25 fields. Extra fields ignored."


def validate_fields(raw_fields: Optional[str]) -> Tuple[List[Dict], List[str]]:
    """
    Converte o input 'fields' (JSON) em uma lista de fields de embed.

    Retorna (fields, diagnosticos). Os diagnósticos nunca interrompem a execução:
    - JSON inválido ou valor que não é lista -> lista vazia
    - mais de 25 entradas -> mantém as 25 primeiras na ordem original
    - qualquer entrada com name/value que não seja string -> lista inteira descartada

    Exemplos:
        '[{"name": "a", "value": "b"}]' -> ([{'name': 'a', 'value': 'b', 'inline': False}], [])
        '{"not": "an array"}' -> ([], ['The fields input is not an array ...'])
    """
    if raw_fields is None or not str(raw_fields).strip():
        return [], []

    diagnostics: List[str] = []

    try:
        parsed = json.loads(raw_fields)
    except (ValueError, TypeError, RecursionError) as exc:
        # RecursionError: aninhamento excessivo (ex.: '[' * 100000)
        return [], [f"The fields input is not valid JSON: {exc}"]

    if not isinstance(parsed, list):
        return [], [f"The fields input is not an array (got {type(parsed).__name__})"]

    if len(parsed) > MAX_EMBED_FIELDS:
        logger.debug(f"Recebidos {len(parsed)} fields, truncando para {MAX_EMBED_FIELDS}")
        diagnostics.append(TOO_MANY_FIELDS)
        parsed = parsed[:MAX_EMBED_FIELDS]

    fields: List[Dict] = []
    for index, entry in enumerate(parsed):
        # Falha fechada: uma entrada inválida descarta a lista inteira
        if not isinstance(entry, dict) or not isinstance(entry.get('name'), str) or not isinstance(entry.get('value'), str):
            diagnostics.append(f"Invalid fields input: field name or value is not a string (entry {index})")
            return [], diagnostics
        fields.append({
            "name": entry['name'],
            "value": entry['value'],
            "inline": entry.get('inline') is True,
        })

    return fields, diagnostics
