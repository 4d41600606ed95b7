"""Domain services for the contribution ledger."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Iterable

from django.db import DatabaseError  # type: ignore

from shared.domain.exceptions import NotFoundError, StoreError, ValidationError

from .models import Contribution

if TYPE_CHECKING:  # pragma: no cover
    from apps.notifications.backends import Notifier

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
# Contribution.amount is DecimalField(max_digits=14, decimal_places=2)
MAX_AMOUNT = Decimal("999999999999.99")


def _parse_amount(amount) -> Decimal:
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as e:
        raise ValidationError("Amount must be a number.", code="invalid_amount") from e
    if not value.is_finite() or value <= 0:
        raise ValidationError("Amount must be positive.", code="invalid_amount")
    if value > MAX_AMOUNT:
        raise ValidationError(f"Amount must not exceed {MAX_AMOUNT}.", code="invalid_amount")
    if value != value.quantize(CENT):
        raise ValidationError("Amount must not have more than 2 decimal places.", code="invalid_amount")
    return value.quantize(CENT)


def record_contribution(
    kitty_address: str,
    name: str,
    email: str,
    amount,
    transaction_ref: str,
    *,
    notifier: "Notifier | None" = None,
) -> Contribution:
    """
    Append a pending contribution to the ledger.

    The kitty address is taken as given: contributions against an unknown
    kitty are accepted. The contributor gets a fire-and-forget confirmation
    once the record is written.
    """
    if not all([kitty_address, name, email, amount, transaction_ref]):
        raise ValidationError("All fields are required.", code="missing_field")

    value = _parse_amount(amount)

    try:
        contribution = Contribution.objects.create(
            kitty_address=kitty_address,
            contributor_name=name,
            contributor_email=email,
            amount=value,
            transaction_ref=transaction_ref,
            status=Contribution.Status.PENDING,
        )
    except DatabaseError as e:
        logger.error(f"Error processing contribution to {kitty_address}: {e}", exc_info=True)
        raise StoreError("Failed to record contribution") from e

    logger.info(
        f"Contribution {contribution.id} of {value} recorded for kitty {kitty_address} "
        f"(ref {transaction_ref})"
    )

    from apps.notifications.services import contribution_received_message, send_message

    send_message(notifier, email, contribution_received_message(contribution))
    return contribution


def _fetch(queryset, what: str) -> list[Contribution]:
    try:
        return list(queryset.order_by("-created_at", "-id"))
    except DatabaseError as e:
        logger.error(f"Error fetching contributions ({what}): {e}", exc_info=True)
        raise StoreError() from e


def list_contributions_by_email(email: str) -> list[Contribution]:
    if not email:
        raise ValidationError("Email is required.", code="missing_email")
    return _fetch(Contribution.objects.filter(contributor_email=email), f"email={email}")


def list_all_contributions() -> list[Contribution]:
    return _fetch(Contribution.objects.all(), "all")


def list_contributions_by_kitty(kitty_address: str) -> list[Contribution]:
    """
    Contributions to one kitty, most recent first.

    An empty result is a NotFoundError. Its code tells an existing kitty with
    no contributions yet (``no_contributions``) from an address no kitty owns
    (``unknown_kitty``); both answer 404.
    """
    if not kitty_address:
        raise ValidationError("Kitty address is required.", code="missing_address")

    contributions = _fetch(
        Contribution.objects.filter(kitty_address=kitty_address), f"kitty={kitty_address}"
    )
    if contributions:
        return contributions

    from apps.kitties.services import kitty_exists

    if kitty_exists(kitty_address):
        raise NotFoundError("No contributions found for this kitty.", code="no_contributions")
    raise NotFoundError("No contributions found for this kitty.", code="unknown_kitty")


def summarize_contributions(contributions: Iterable[Contribution]) -> Decimal:
    """Sum of every amount, whatever its status."""
    return sum((c.amount for c in contributions), Decimal("0.00"))
