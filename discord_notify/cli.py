"""Envio único de notificação pela linha de comando (ou step do GitHub Actions).

Opções ausentes caem para as variáveis INPUT_<NOME> do ambiente.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .constants import DEBUG_MODE
from .controller import TestWebhookUrlNotFound, run
from .inputs import ChainedInputs, EnvironmentInputs, MappingInputs
from .reporting import ActionsReporter, LoggingReporter

logger = logging.getLogger(__name__)

# dest do argparse -> nome do input
OPTION_INPUTS = {
    'webhook_url': 'webhookUrl',
    'flags': 'flags',
    'username': 'username',
    'avatar_url': 'avatarUrl',
    'text': 'text',
    'severity': 'severity',
    'title': 'title',
    'description': 'description',
    'fields': 'fields',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Envia uma notificação de CI para um webhook do Discord")
    parser.add_argument('--webhook-url', help="URL do webhook (ou 'useTestURL')")
    parser.add_argument('--flags', help="SuppressNotifications SuppressEmbeds IsComponentsV2")
    parser.add_argument('--username', help="Nome do remetente")
    parser.add_argument('--avatar-url', help="Avatar do remetente")
    parser.add_argument('--text', help="Texto simples da mensagem")
    parser.add_argument('--severity', help="info, warn ou error")
    parser.add_argument('--title', help="Título do embed")
    parser.add_argument('--description', help="Descrição do embed")
    parser.add_argument('--fields', help="Array JSON de {name, value, inline}")
    parser.add_argument('--github-actions', action='store_true',
                        help="Reporta warnings/notices como workflow commands do GitHub Actions")
    return parser


def main(argv: Optional[List[str]] = None, environ=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if DEBUG_MODE else logging.INFO, format="%(levelname)s %(message)s")

    cli_inputs = MappingInputs({name: getattr(args, dest) for dest, name in OPTION_INPUTS.items()})
    inputs = ChainedInputs(cli_inputs, EnvironmentInputs(environ))
    reporter = ActionsReporter() if args.github_actions else LoggingReporter()

    try:
        result = run(inputs, reporter=reporter)
    except TestWebhookUrlNotFound as exc:
        logger.error(str(exc))
        return 1

    # Falha de envio não é erro de execução: já foi reportada como notice
    logger.debug(f"Resultado do envio: {result.status.value}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
