"""Contribution ledger model."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore


class Contribution(models.Model):
    """A single contribution recorded against a kitty address."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        # Terminal states reserved for reconciliation; nothing here sets them.
        CONFIRMED = "confirmed", "Confirmed"
        FAILED = "failed", "Failed"

    # Loose coupling by address: no foreign key, orphans are allowed.
    kitty_address = models.CharField(max_length=255, db_index=True)
    contributor_name = models.CharField(max_length=255)
    contributor_email = models.EmailField(db_index=True)
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    transaction_ref = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.contributor_email} -> {self.kitty_address}: {self.amount} ({self.status})"
