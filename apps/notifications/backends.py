"""Notifier backends.

A notifier accepts a recipient, a subject and a body (plain text with an
optional HTML alternative) and either delivers it or raises
:class:`~shared.domain.exceptions.NotificationError`. The active backend is
named by ``settings.NOTIFIER_BACKEND``, in the same spirit as Django's
``EMAIL_BACKEND``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore
from django.utils.html import strip_tags  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from shared.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Base class for notification transports."""

    @abstractmethod
    def send(self, recipient: str, subject: str, body: str, *, html: str | None = None) -> None:
        """Deliver one message to one recipient or raise NotificationError."""


class EmailNotifier(Notifier):
    """Sends through Django's configured email backend."""

    def __init__(self, from_email: str | None = None):
        self.from_email = from_email or settings.DEFAULT_FROM_EMAIL

    def send(self, recipient: str, subject: str, body: str, *, html: str | None = None) -> None:
        if not recipient:
            raise NotificationError("No recipient email", code="no_recipient")

        text = body or (strip_tags(html) if html else "")
        try:
            send_mail(
                subject=subject,
                message=text,
                from_email=self.from_email,
                recipient_list=[recipient],
                html_message=html,
                fail_silently=False,
            )
        except Exception as e:
            raise NotificationError(f"Failed to send email to {recipient}: {e}") from e

        logger.info(f"Email sent to {recipient}: {subject}")


def get_notifier(path: str | None = None) -> Notifier:
    """Instantiate the notifier backend named by ``path`` or the settings."""
    backend = import_string(path or settings.NOTIFIER_BACKEND)
    return backend()
