"""DRF exception handler that renders domain errors."""

from __future__ import annotations

import logging

from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import GatewayError, VaultFundError

logger = logging.getLogger(__name__)


def vaultfund_exception_handler(exc, context):
    """Map :class:`VaultFundError` subclasses to JSON responses.

    Anything else (DRF's own validation errors, 404s, auth errors) is left to
    the default handler.
    """
    if not isinstance(exc, VaultFundError):
        return exception_handler(exc, context)

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if exc.status_code >= 500:
        logger.error(f"{view_name} failed: {exc.code}: {exc.detail}", exc_info=exc)
    else:
        logger.info(f"{view_name} rejected request: {exc.code}: {exc.detail}")

    data = {"error": exc.detail, "code": exc.code}
    if isinstance(exc, GatewayError) and exc.payload is not None:
        data["provider_response"] = exc.payload
    return Response(data, status=exc.status_code)
