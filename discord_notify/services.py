import logging
from typing import Dict, Optional

import requests

from .constants import DEBUG_MODE, DISCORD_TIMEOUT_SECONDS
from .flags import MessageFlags

logger = logging.getLogger(__name__)


class DiscordDeliveryError(requests.HTTPError):
    """Resposta não-2xx do webhook do Discord."""


class DiscordWebhookClient:
    def __init__(self, webhook_url: str, timeout: int = DISCORD_TIMEOUT_SECONDS, session: Optional[requests.Session] = None):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_params(self, flags: int) -> Dict[str, str]:
        params = {"wait": "true"}
        # Components V2 só é aceito pelo webhook com with_components=true
        if flags & MessageFlags.IsComponentsV2:
            params["with_components"] = "true"
        return params

    def send(self, payload: Dict) -> requests.Response:
        flags = int(payload.get("flags") or 0)
        resp = self.session.post(
            self.webhook_url,
            json=payload,
            params=self.build_params(flags),
            timeout=self.timeout,
        )
        if DEBUG_MODE:
            try:
                print(f"[DEBUG] Discord response: {resp.status_code}")
                if resp.status_code not in (200, 204):
                    print(f"[DEBUG] Response content: {resp.text}")
            except Exception:
                pass
        if not resp.ok:
            raise DiscordDeliveryError(
                f"Discord webhook returned HTTP {resp.status_code}: {resp.text[:200]}",
                response=resp,
            )
        return resp
