"""
hostedhooks.models — Message envelope, notifier configuration and delivery result.

Envelope shape accepted by POST /apps/{app_uuid}/messages:

    {"data": {"user": <record>}, "version": "1.0", "event_type": "<tag>"}

The envelope is built fresh per notification and never mutated.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from aws_lambda_powertools import Logger

logger = Logger(service="hostedhooks-lib", child=True)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
HOSTEDHOOKS_BASE_URL = "https://www.hostedhooks.com/api/v1"
ENVELOPE_VERSION = "1.0"

# Event tags
USER_CREATED = "user.created"

# Substituted for a missing APP_UUID / HOSTEDHOOKS_API_KEY. The request is
# still sent; HostedHooks answers 401/404 and that failure is logged.
UNSET_VALUE = "undefined"

_APP_UUID_ENV = "APP_UUID"
_API_KEY_ENV = "HOSTEDHOOKS_API_KEY"  # pragma: allowlist secret
_BASE_URL_ENV = "HOSTEDHOOKS_BASE_URL"
_TIMEOUT_ENV = "HOSTEDHOOKS_TIMEOUT_SECONDS"


class DeliveryOutcome(StrEnum):
    DELIVERED = "delivered"
    FAILED = "failed"


@dataclass(frozen=True)
class NotificationEnvelope:
    """HostedHooks message body.

    user is the record exactly as the store produced it; no field is added
    or removed.
    """

    event_type: str
    user: Any
    version: str = ENVELOPE_VERSION

    def __post_init__(self) -> None:
        if not isinstance(self.event_type, str) or not self.event_type:
            raise ValueError("event_type must be a non-empty string")

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": {"user": self.user},
            "version": self.version,
            "event_type": self.event_type,
        }


@dataclass(frozen=True)
class NotifierConfig:
    """Connection settings for HostedHooks.

    timeout_seconds=None leaves the request unbounded; the Lambda timeout
    terminates it instead.
    """

    app_uuid: str
    api_key: str
    base_url: str = HOSTEDHOOKS_BASE_URL
    timeout_seconds: float | None = None

    @property
    def messages_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/apps/{self.app_uuid}/messages"

    @classmethod
    def from_env(cls) -> NotifierConfig:
        """Read the configuration from the process environment at call time."""
        app_uuid = os.environ.get(_APP_UUID_ENV)
        api_key = os.environ.get(_API_KEY_ENV)
        if not app_uuid:
            logger.warning(f"{_APP_UUID_ENV} not set, messages URL will be invalid")
        if not api_key:
            logger.warning(f"{_API_KEY_ENV} not set, HostedHooks will reject the request")

        timeout_raw = os.environ.get(_TIMEOUT_ENV)
        timeout_seconds: float | None = None
        if timeout_raw:
            try:
                timeout_seconds = float(timeout_raw)
            except ValueError:
                logger.warning(
                    "Ignoring invalid request timeout", extra={"value": timeout_raw}
                )

        return cls(
            app_uuid=app_uuid or UNSET_VALUE,
            api_key=api_key or UNSET_VALUE,
            base_url=os.environ.get(_BASE_URL_ENV) or HOSTEDHOOKS_BASE_URL,
            timeout_seconds=timeout_seconds,
        )


@dataclass(frozen=True)
class DeliveryResult:
    """Terminal outcome of one notification. Callers are free to discard it."""

    outcome: DeliveryOutcome
    status_code: int | None = None
    response_body: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == DeliveryOutcome.DELIVERED
