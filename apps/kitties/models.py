"""Kitty model."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore


class Kitty(models.Model):
    """A named, addressable group-savings purse."""

    email = models.EmailField(help_text="Creator contact")
    name = models.CharField(max_length=255)
    description = models.TextField()
    kitty_type = models.CharField(max_length=100, help_text="Category tag")
    beneficiary_count = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    maturity_date = models.DateTimeField()
    address = models.CharField(max_length=255, unique=True)
    # Advisory running total; never derived from the contribution ledger.
    amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "kitty"
        verbose_name_plural = "kitties"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["email"], name="kitty_email_idx"),
            models.Index(fields=["maturity_date"], name="kitty_maturity_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.address})"
