import enum
import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .constants import NOTIFY_HOLDDOWN_SECONDS, TEST_URL_SENTINEL, TEST_WEBHOOK_URL_FILE
from .fields import validate_fields
from .flags import MessageFlags, parse_flags
from .formatters import build_message, normalize_severity
from .holddown import HolddownState, default_holddown_state, wait_for_holddown
from .inputs import EnvironmentInputs, input_text
from .reporting import LoggingReporter
from .services import DiscordWebhookClient

logger = logging.getLogger(__name__)

MISSING_WEBHOOK_URL = "webhookUrl was not provided. Notification not sent."


class TestWebhookUrlNotFound(FileNotFoundError):
    """O webhookUrl pediu o endpoint de teste, mas a URL de teste não foi encontrada."""

    __test__ = False  # evita coleta pelo pytest


class DeliveryStatus(str, enum.Enum):
    IDLE = 'idle'
    WAITING = 'waiting'
    SENDING = 'sending'
    SKIPPED = 'skipped'
    DELIVERED = 'delivered'
    FAILED = 'failed'


@dataclass
class DeliveryResult:
    status: DeliveryStatus
    payload: Optional[Dict] = None
    waited: float = 0.0
    error: Optional[BaseException] = None


def resolve_webhook_url(webhook_url: str, test_url_file: str = TEST_WEBHOOK_URL_FILE) -> str:
    """
    Substitui o sentinela 'useTestURL' pela URL lida de test_url_file.
    Qualquer outro valor é devolvido sem alteração.
    """
    if webhook_url != TEST_URL_SENTINEL:
        return webhook_url

    if not test_url_file or not os.path.exists(test_url_file):
        raise TestWebhookUrlNotFound(f"Test webhook URL file not found: {test_url_file}")

    with open(test_url_file, 'r', encoding='utf-8') as fp:
        test_url = fp.read().strip()
    if not test_url:
        raise TestWebhookUrlNotFound(f"Test webhook URL file is empty: {test_url_file}")

    logger.debug(f"Usando webhook de teste lido de {test_url_file}")
    return test_url


class DeliveryController:
    """
    Máquina de estados de envio: IDLE -> WAITING (holddown) -> SENDING -> DELIVERED | FAILED.
    Sem webhookUrl vai direto para SKIPPED (warning, sem chamar o transporte).

    O holddown é registrado imediatamente antes do envio, tanto em sucesso quanto
    em falha, para que falhas seguidas também sejam espaçadas.
    """

    def __init__(self, holddown_state: HolddownState, reporter=None,
                 transport_factory: Callable = DiscordWebhookClient,
                 holddown_seconds: float = NOTIFY_HOLDDOWN_SECONDS,
                 sleep: Callable[[float], None] = time.sleep,
                 test_url_file: str = TEST_WEBHOOK_URL_FILE):
        self.holddown_state = holddown_state
        self.reporter = reporter or LoggingReporter()
        self.transport_factory = transport_factory
        self.holddown_seconds = holddown_seconds
        self.sleep = sleep
        self.test_url_file = test_url_file
        self.status = DeliveryStatus.IDLE

    def deliver(self, webhook_url: Optional[str], payload: Dict, flags: MessageFlags = MessageFlags.NONE,
                transport=None, context: Optional[Dict] = None) -> DeliveryResult:
        self.status = DeliveryStatus.IDLE
        if not webhook_url or not webhook_url.strip():
            self.reporter.warning(MISSING_WEBHOOK_URL)
            self.status = DeliveryStatus.SKIPPED
            return DeliveryResult(self.status, payload)

        url = resolve_webhook_url(webhook_url.strip(), self.test_url_file)

        self.status = DeliveryStatus.WAITING
        waited = wait_for_holddown(self.holddown_state, self.holddown_seconds, self.sleep)

        self.status = DeliveryStatus.SENDING
        message = dict(payload)
        if flags:
            message["flags"] = int(flags)
        if transport is None:
            transport = self.transport_factory(url)

        self.holddown_state.touch()
        try:
            transport.send(message)
        except Exception as exc:
            self.status = DeliveryStatus.FAILED
            self.reporter.notice(self._failure_notice(exc, context or {}))
            return DeliveryResult(self.status, message, waited, error=exc)

        self.status = DeliveryStatus.DELIVERED
        logger.debug("Notificação entregue ao Discord")
        return DeliveryResult(self.status, message, waited)

    @staticmethod
    def _failure_notice(exc: BaseException, context: Dict) -> str:
        severity = context.get('severity') or 'none'
        fields = json.dumps(context.get('fields') or [], ensure_ascii=False)
        return f"Failed to send Discord notification: {exc!r}. severity={severity} fields={fields}"


def run(inputs=None, reporter=None, transport=None, holddown_state: Optional[HolddownState] = None,
        controller: Optional[DeliveryController] = None) -> DeliveryResult:
    """
    Executa uma notificação completa: lê os inputs, valida fields, monta a mensagem
    e entrega respeitando o holddown.

    Erros de configuração (webhookUrl ausente, fields inválidos) viram warning e
    falhas de envio viram notice; nenhum deles é propagado. TestWebhookUrlNotFound
    é propagado para o chamador decidir.

    Com um controller explícito, reporter e holddown vêm dele; passar valores
    diferentes junto com o controller é erro de uso (ValueError).
    """
    inputs = inputs or EnvironmentInputs()
    if controller is None:
        reporter = reporter or LoggingReporter()
        controller = DeliveryController(holddown_state or default_holddown_state, reporter)
    else:
        if reporter is not None and reporter is not controller.reporter:
            raise ValueError("reporter conflicts with controller.reporter; configure the reporter on the controller")
        if holddown_state is not None and holddown_state is not controller.holddown_state:
            raise ValueError("holddown_state conflicts with controller.holddown_state; configure it on the controller")
        reporter = controller.reporter

    warnings: List[str] = []

    fields, diagnostics = validate_fields(inputs.get('fields'))
    warnings.extend(diagnostics)

    severity, severity_diagnostic = normalize_severity(inputs.get('severity'))
    if severity_diagnostic:
        warnings.append(severity_diagnostic)

    for msg in warnings:
        reporter.warning(msg)

    flags = parse_flags(inputs.get('flags'))
    payload = build_message(inputs, fields, severity, flags)

    return controller.deliver(
        input_text(inputs, 'webhookUrl'),
        payload,
        flags,
        transport=transport,
        context={'severity': severity, 'fields': fields},
    )
