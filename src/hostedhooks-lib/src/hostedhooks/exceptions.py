"""
hostedhooks.exceptions — Delivery failures raised by the strict send path.
"""

from __future__ import annotations


class WebhookDeliveryError(Exception):
    """
    Raised by HostedHooksNotifier.deliver when a message could not be delivered.

    Covers both transport failures (DNS, connection reset, timeout) and
    non-2xx responses from HostedHooks. HostedHooksNotifier.notify catches
    it and logs it; only callers of deliver() ever see it.

    Attributes:
        url:         Messages endpoint the POST was sent to.
        status_code: HTTP status of the response, or None on transport failure.
        reason:      Short human-readable cause.
    """

    def __init__(self, *, url: str, status_code: int | None, reason: str) -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = status_code if status_code is not None else "no response"
        super().__init__(f"Webhook delivery to {url!r} failed ({status}): {reason}")
