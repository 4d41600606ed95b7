"""Domain services for the kitty registry."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from django.db import DatabaseError, IntegrityError, transaction  # type: ignore

from shared.domain.exceptions import ConflictError, NotFoundError, StoreError, ValidationError

from .models import Kitty

if TYPE_CHECKING:  # pragma: no cover
    from apps.notifications.backends import Notifier

logger = logging.getLogger(__name__)

DUPLICATE_ADDRESS_MESSAGE = "Kitty address already exists."


def create_kitty(
    *,
    email: str,
    name: str,
    description: str,
    kitty_type: str,
    beneficiary_count: int,
    maturity_date: datetime,
    address: str,
    notifier: "Notifier | None" = None,
) -> Kitty:
    """
    Register a new kitty and confirm it to the creator.

    The existence check gives a friendly error in the common case; the unique
    constraint on ``address`` is what decides between two concurrent
    creators, and the loser gets the same ConflictError.

    The confirmation email is fire-and-forget: its failure never undoes the
    creation.
    """
    fields = {
        "email": email,
        "name": name,
        "description": description,
        "type": kitty_type,
        "beneficiary_count": beneficiary_count,
        "maturity_date": maturity_date,
        "address": address,
    }
    missing = [field for field, value in fields.items() if value in (None, "")]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}", code="missing_field")
    if beneficiary_count < 1:
        raise ValidationError("beneficiary_count must be a positive integer.")

    try:
        if Kitty.objects.filter(address=address).exists():
            logger.info(f"Rejected kitty creation: address {address} is taken")
            raise ConflictError(DUPLICATE_ADDRESS_MESSAGE, code="duplicate_address")

        with transaction.atomic():
            kitty = Kitty.objects.create(
                email=email,
                name=name,
                description=description,
                kitty_type=kitty_type,
                beneficiary_count=beneficiary_count,
                maturity_date=maturity_date,
                address=address,
            )
    except IntegrityError as e:
        logger.info(f"Concurrent kitty creation lost the race for address {address}: {e}")
        raise ConflictError(DUPLICATE_ADDRESS_MESSAGE, code="duplicate_address") from e
    except DatabaseError as e:
        logger.error(f"Error creating kitty {address}: {e}", exc_info=True)
        raise StoreError() from e

    logger.info(f"Kitty {kitty.address} created for {kitty.email}")

    from apps.notifications.services import kitty_created_message, send_message

    send_message(notifier, kitty.email, kitty_created_message(kitty))
    return kitty


def list_kitties():
    """All kitties, newest first. No pagination."""
    try:
        return list(Kitty.objects.all())
    except DatabaseError as e:
        logger.error(f"Error fetching kitties: {e}", exc_info=True)
        raise StoreError() from e


def find_kitties_by_email(email: str) -> list[Kitty]:
    if not email:
        raise ValidationError("Email is required.", code="missing_email")

    try:
        kitties = list(Kitty.objects.filter(email=email))
    except DatabaseError as e:
        logger.error(f"Error fetching kitties for {email}: {e}", exc_info=True)
        raise StoreError() from e

    if not kitties:
        raise NotFoundError("No kitties found for this email.", code="no_kitties")
    return kitties


def kitty_exists(address: str) -> bool:
    try:
        return Kitty.objects.filter(address=address).exists()
    except DatabaseError as e:
        logger.error(f"Error checking kitty {address}: {e}", exc_info=True)
        raise StoreError() from e
