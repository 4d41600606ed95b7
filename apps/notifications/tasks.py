"""Celery tasks for notification delivery."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .backends import get_notifier
from .services import deliver

logger = logging.getLogger(__name__)


@shared_task(name="notifications.send_notification", ignore_result=True)
def send_notification(recipient: str, subject: str, body: str, html: str | None = None) -> bool:
    """Deliver a single message with the configured notifier backend."""
    delivered = deliver(get_notifier(), recipient, subject, body, html=html)
    if delivered:
        logger.info(f"[NOTIFICATION] '{subject}' delivered to {recipient}")
    return delivered
