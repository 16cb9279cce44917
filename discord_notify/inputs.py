"""Fontes de configuração: cada uma expõe get(name) -> str | None."""
import json
import os
from typing import Mapping, Optional

INPUT_NAMES = (
    'webhookUrl',
    'flags',
    'username',
    'avatarUrl',
    'text',
    'severity',
    'title',
    'description',
    'fields',
)


def input_text(inputs, name: str) -> str:
    # Mesmo comportamento do getInput do GitHub Actions: trim e '' quando ausente
    value = inputs.get(name)
    if value is None:
        return ''
    return str(value).strip()


class MappingInputs:
    """Inputs vindos de um dict (corpo JSON, argumentos de CLI, testes)."""

    def __init__(self, values: Optional[Mapping] = None):
        self._values = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        value = self._values.get(name)
        if value is None:
            return None
        if isinstance(value, (list, dict)) and name == 'fields':
            # permite enviar fields já como estrutura no corpo JSON
            return json.dumps(value)
        return str(value)

    def __repr__(self):
        return f"MappingInputs({sorted(self._values)})"


class EnvironmentInputs:
    """
    Inputs no padrão do GitHub Actions: INPUT_<NOME> (maiúsculo, espaços -> '_').
    webhookUrl ainda aceita DISCORD_WEBHOOK_URL como fallback.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    @staticmethod
    def env_name(name: str) -> str:
        return f"INPUT_{name.replace(' ', '_').upper()}"

    def get(self, name: str) -> Optional[str]:
        value = self.environ.get(self.env_name(name))
        if value is None and name == 'webhookUrl':
            value = self.environ.get('DISCORD_WEBHOOK_URL')
        return value


class ChainedInputs:
    """Consulta as fontes em ordem e retorna o primeiro valor não vazio."""

    def __init__(self, *sources):
        self.sources = sources

    def get(self, name: str) -> Optional[str]:
        for source in self.sources:
            value = source.get(name)
            if value is not None and str(value).strip():
                return value
        return None
