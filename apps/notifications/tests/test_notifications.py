from smtplib import SMTPException
from unittest.mock import patch

import pytest
from django.core import mail
from django.test import override_settings
from django.utils import timezone

from apps.kitties.models import Kitty
from apps.notifications.backends import EmailNotifier, Notifier, get_notifier
from apps.notifications.services import (
    deliver,
    dispatch_notification,
    kitty_created_message,
    send_welcome_email,
    welcome_message,
)
from shared.domain.exceptions import NotificationError


def test_email_notifier_sends_text_and_html():
    EmailNotifier(from_email="team@vaultfund.test").send(
        "a@x.com", "Hello", "plain body", html="<p>html body</p>"
    )

    assert len(mail.outbox) == 1
    sent = mail.outbox[0]
    assert sent.to == ["a@x.com"]
    assert sent.from_email == "team@vaultfund.test"
    assert sent.body == "plain body"
    assert sent.alternatives[0][0] == "<p>html body</p>"


def test_email_notifier_requires_recipient():
    with pytest.raises(NotificationError):
        EmailNotifier().send("", "Hello", "body")

    assert mail.outbox == []


def test_email_notifier_wraps_transport_errors():
    with patch("apps.notifications.backends.send_mail", side_effect=SMTPException("relay denied")):
        with pytest.raises(NotificationError):
            EmailNotifier().send("a@x.com", "Hello", "body")


def test_deliver_reports_outcome(notifier, failing_notifier):
    assert deliver(notifier, "a@x.com", "Hi", "body") is True
    assert deliver(failing_notifier("a@x.com"), "a@x.com", "Hi", "body") is False


def test_dispatch_with_injected_notifier_is_inline(notifier):
    dispatch_notification("a@x.com", "Hi", "body", notifier=notifier)

    assert notifier.recipients == ["a@x.com"]
    assert mail.outbox == []


def test_dispatch_without_notifier_goes_through_task_queue():
    dispatch_notification("a@x.com", "Queued", "body", html="<b>body</b>")

    assert [m.subject for m in mail.outbox] == ["Queued"]


def test_dispatch_never_raises_when_queue_is_down():
    with patch("apps.notifications.tasks.send_notification.delay", side_effect=ConnectionError("broker down")):
        dispatch_notification("a@x.com", "Hi", "body")

    assert mail.outbox == []


def test_dispatch_swallows_delivery_failure():
    with patch("apps.notifications.backends.send_mail", side_effect=SMTPException("down")):
        dispatch_notification("a@x.com", "Hi", "body")


def test_welcome_message_names_the_member():
    message = welcome_message("Wanjiku")

    assert message.subject == "Welcome to VaultFund"
    assert message.body.startswith("Hello Wanjiku,")


def test_send_welcome_email_propagates_failure(failing_notifier):
    with pytest.raises(NotificationError):
        send_welcome_email("Wanjiku", "w@x.com", notifier=failing_notifier("w@x.com"))


def test_get_notifier_follows_settings():
    assert isinstance(get_notifier(), EmailNotifier)

    with override_settings(NOTIFIER_BACKEND="apps.notifications.backends.Missing"):
        with pytest.raises(ImportError):
            get_notifier()


class ExplodingNotifier(Notifier):
    def send(self, recipient, subject, body, *, html=None):
        raise RuntimeError("transport blew up")


def test_deliver_contains_unexpected_notifier_errors():
    assert deliver(ExplodingNotifier(), "a@x.com", "Hi", "body") is False


def test_kitty_created_html_escapes_user_text():
    kitty = Kitty(
        email="owner@example.com",
        name="<script>alert(1)</script>",
        description="d",
        kitty_type="a&b",
        beneficiary_count=2,
        maturity_date=timezone.now(),
        address='KT-"1"',
    )

    message = kitty_created_message(kitty)

    assert "<script>" not in message.html
    assert "&lt;script&gt;" in message.html
    assert "a&amp;b" in message.html
    assert "KT-&quot;1&quot;" in message.html
    assert "<script>alert(1)</script>" in message.body
