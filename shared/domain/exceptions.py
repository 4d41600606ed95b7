"""
Domain Errors

Every failure a VaultFund operation can report to its caller. Views never
build error responses by hand: they let these propagate and the DRF
exception handler in ``shared.infrastructure.exception_handler`` renders
them.
"""

from __future__ import annotations

from typing import Any


class VaultFundError(Exception):
    """Base class for errors raised by domain services."""

    status_code = 500
    default_code = "error"
    default_detail = "Internal server error."

    def __init__(self, detail: str | None = None, *, code: str | None = None):
        self.detail = detail or self.default_detail
        self.code = code or self.default_code
        super().__init__(self.detail)


class ValidationError(VaultFundError):
    """Missing or invalid input."""

    status_code = 400
    default_code = "invalid"
    default_detail = "Invalid input."


class ConflictError(VaultFundError):
    """A unique attribute (kitty address) is already taken."""

    # The public API has always answered duplicates with a plain 400
    status_code = 400
    default_code = "conflict"
    default_detail = "Resource already exists."


class NotFoundError(VaultFundError):
    status_code = 404
    default_code = "not_found"
    default_detail = "Nothing found."


class StoreError(VaultFundError):
    """Persistence failure. The detail never leaks storage internals."""

    default_code = "store_error"
    default_detail = "Internal server error."


class GatewayError(VaultFundError):
    """
    The payment provider refused a request.

    ``payload`` keeps the provider's raw response body (when there was one)
    so it can be surfaced to the end user.
    """

    default_code = "gateway_error"
    default_detail = "Payment gateway error."

    def __init__(self, detail: str | None = None, *, payload: Any = None, code: str | None = None):
        super().__init__(detail, code=code)
        self.payload = payload


class GatewayAuthError(GatewayError):
    default_code = "gateway_auth_error"
    default_detail = "Could not authenticate with the payment gateway."


class PushRejected(GatewayError):
    default_code = "push_rejected"
    default_detail = "The payment gateway rejected the push request."


class NotificationError(VaultFundError):
    """Raised by notifier backends; always caught and logged by the caller."""

    default_code = "notification_error"
    default_detail = "Notification could not be delivered."
