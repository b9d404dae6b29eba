"""
hostedhooks — Minimal client for the HostedHooks webhook-relay API.

Wraps a domain record in the HostedHooks message envelope and POSTs it to
the app's messages endpoint. Delivery is fire-and-forget: failures are
logged, never raised to the caller.
"""

from hostedhooks.client import HostedHooksNotifier, send_webhook_message
from hostedhooks.exceptions import WebhookDeliveryError
from hostedhooks.models import (
    USER_CREATED,
    DeliveryOutcome,
    DeliveryResult,
    NotificationEnvelope,
    NotifierConfig,
)

__all__ = [
    "USER_CREATED",
    "DeliveryOutcome",
    "DeliveryResult",
    "HostedHooksNotifier",
    "NotificationEnvelope",
    "NotifierConfig",
    "WebhookDeliveryError",
    "send_webhook_message",
]
