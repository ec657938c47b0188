# ============================================
# issues/clients/webhook_client.py
# ============================================
import logging
from typing import Any, Dict, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


def _mask_webhook(url: Optional[str]) -> str:
    if not url:
        return ""
    if len(url) <= 14:
        return "***"
    return f"{url[:10]}...{url[-4:]}"


class WebhookClient:
    """Posts lifecycle events as JSON to an outside listener (chat bot, mail relay, ...)"""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        self.url = url if url is not None else getattr(settings, 'ISSUES_WEBHOOK_URL', '')
        self.timeout = timeout or getattr(settings, 'ISSUES_WEBHOOK_TIMEOUT', 5)

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    def post_event(self, event: str, payload: Dict[str, Any]) -> bool:
        """Returns True when the listener acknowledged with a 2xx"""
        if not self.enabled:
            logger.debug("[issues.webhook] URL not configured; skip %s", event)
            return False

        try:
            response = requests.post(
                self.url,
                json={'event': event, 'data': payload},
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("[issues.webhook] %s to %s failed: %s", event, _mask_webhook(self.url), e)
            return False

        logger.info("[issues.webhook] %s delivered (%s)", event, response.status_code)
        return True
