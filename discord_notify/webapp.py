from flask import Flask, request

from .constants import DEBUG_MODE
from .controller import DeliveryController, DeliveryStatus, TestWebhookUrlNotFound, run
from .holddown import default_holddown_state
from .inputs import INPUT_NAMES, MappingInputs
from .reporting import CollectingReporter
from .services import DiscordWebhookClient


def create_app(transport_factory=None, holddown_state=None, **controller_options):
    app = Flask(__name__)
    # Holddown compartilhado entre requisições (em memória, por processo)
    state = holddown_state or default_holddown_state
    factory = transport_factory or DiscordWebhookClient

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'discord-notify'}, 200

    @app.route('/notify', methods=['POST'])
    def notify():
        reporter = CollectingReporter()
        try:
            data = request.get_json(silent=True)
            if data is None:
                data = {}
            if DEBUG_MODE:
                print(f"[DEBUG] Received data: {data}")
            if not isinstance(data, dict):
                return {'status': 'error', 'error': 'request body must be a JSON object'}, 400

            inputs = MappingInputs({name: data.get(name) for name in INPUT_NAMES})
            controller = DeliveryController(state, reporter, transport_factory=factory, **controller_options)
            result = run(inputs, controller=controller)
        except TestWebhookUrlNotFound as e:
            return {'status': 'error', 'error': str(e), 'warnings': reporter.warnings, 'notices': reporter.notices}, 500
        except Exception as e:
            if DEBUG_MODE:
                print(f"[ERROR] {str(e)}")
            return f'Error: {str(e)}', 500

        code = 502 if result.status == DeliveryStatus.FAILED else 200
        return {
            'status': result.status.value,
            'warnings': reporter.warnings,
            'notices': reporter.notices,
        }, code

    return app
