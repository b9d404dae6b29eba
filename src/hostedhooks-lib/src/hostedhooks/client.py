"""
hostedhooks.client — HostedHooksNotifier.

Sends one message per domain event to
POST {base_url}/apps/{app_uuid}/messages with bearer authentication.

Two entry points:
  - deliver(): strict. Raises WebhookDeliveryError on transport failure or
    non-2xx response.
  - notify(): fire-and-forget. Logs the response body on success, logs any
    exception on failure and returns a DeliveryResult. Never raises, never
    retries.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

import requests
from aws_lambda_powertools import Logger

from hostedhooks.exceptions import WebhookDeliveryError
from hostedhooks.models import (
    DeliveryOutcome,
    DeliveryResult,
    NotificationEnvelope,
    NotifierConfig,
)

logger = Logger(service="hostedhooks-lib")


def _json_default(value: Any) -> Any:
    # DynamoDB numbers arrive as Decimal
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _response_body(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class HostedHooksNotifier:
    """
    Client for the HostedHooks messages endpoint.

    Configuration is passed in explicitly; the notifier never reads the
    environment itself. http is anything exposing requests-compatible post()
    (the requests module, a requests.Session, or a test double).
    """

    def __init__(self, config: NotifierConfig, *, http: Any = None) -> None:
        self._config = config
        self._http: Any = http or requests

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def build_envelope(self, event_type: str, payload: Any) -> NotificationEnvelope:
        return NotificationEnvelope(event_type=event_type, user=payload)

    def deliver(self, event_type: str, payload: Any) -> requests.Response:
        """POST one message. Raises WebhookDeliveryError if it is not accepted."""
        url = self._config.messages_url
        envelope = self.build_envelope(event_type, payload)
        body = json.dumps(envelope.to_dict(), default=_json_default, separators=(",", ":"))

        try:
            response = self._http.post(
                url,
                data=body,
                headers=self._headers(),
                timeout=self._config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise WebhookDeliveryError(url=url, status_code=status_code, reason=str(exc)) from exc
        except requests.RequestException as exc:
            raise WebhookDeliveryError(url=url, status_code=None, reason=str(exc)) from exc
        return response

    def notify(self, event_type: str, payload: Any) -> DeliveryResult:
        """Deliver a message, logging instead of raising on any failure."""
        try:
            response = self.deliver(event_type, payload)
            body = _response_body(response)
        except Exception as exc:
            logger.exception(
                "Failed to deliver webhook message",
                extra={"event_type": event_type, "url": self._config.messages_url},
            )
            return DeliveryResult(
                outcome=DeliveryOutcome.FAILED,
                status_code=exc.status_code if isinstance(exc, WebhookDeliveryError) else None,
                error=str(exc),
            )

        logger.info(
            "Webhook message delivered",
            extra={
                "event_type": event_type,
                "status_code": response.status_code,
                "response": body,
            },
        )
        return DeliveryResult(
            outcome=DeliveryOutcome.DELIVERED,
            status_code=response.status_code,
            response_body=body,
        )


def send_webhook_message(
    event_type: str, payload: Any, config: NotifierConfig | None = None
) -> DeliveryResult:
    """Notify HostedHooks of an event, reading config from the environment if not given."""
    notifier = HostedHooksNotifier(config or NotifierConfig.from_env())
    return notifier.notify(event_type, payload)
