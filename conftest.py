"""Shared pytest fixtures: fake notifiers and kitty/contribution factories."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.notifications.backends import Notifier
from shared.domain.exceptions import NotificationError


@dataclass
class SentMessage:
    recipient: str
    subject: str
    body: str
    html: str | None


class RecordingNotifier(Notifier):
    """Keeps every message; refuses recipients listed in ``fail_for``."""

    def __init__(self, fail_for=()):
        self.sent: list[SentMessage] = []
        self.attempts: list[str] = []
        self.fail_for = set(fail_for)

    def send(self, recipient, subject, body, *, html=None):
        self.attempts.append(recipient)
        if recipient in self.fail_for:
            raise NotificationError(f"mailbox {recipient} unavailable")
        self.sent.append(SentMessage(recipient, subject, body, html))

    @property
    def recipients(self) -> list[str]:
        return [m.recipient for m in self.sent]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def make_kitty(db):
    from apps.kitties.models import Kitty

    def factory(address="KT-001", *, maturity_date=None, **overrides):
        fields = {
            "email": "owner@example.com",
            "name": "Chama Savings",
            "description": "Monthly savings for the group",
            "kitty_type": "chama",
            "beneficiary_count": 5,
            "maturity_date": maturity_date or timezone.now() + timedelta(days=365),
            "address": address,
        }
        fields.update(overrides)
        return Kitty.objects.create(**fields)

    return factory


@pytest.fixture
def make_contribution(db):
    from apps.contributions.models import Contribution

    def factory(kitty_address="KT-001", email="a@x.com", amount="100", **overrides):
        fields = {
            "kitty_address": kitty_address,
            "contributor_name": email.split("@")[0].upper(),
            "contributor_email": email,
            "amount": Decimal(str(amount)),
            "transaction_ref": f"REF-{Contribution.objects.count() + 1}",
        }
        fields.update(overrides)
        return Contribution.objects.create(**fields)

    return factory


@pytest.fixture
def failing_notifier():
    def factory(*recipients):
        return RecordingNotifier(fail_for=recipients)

    return factory
