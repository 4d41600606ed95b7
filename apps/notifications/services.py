"""Notification services: delivery helpers and message builders."""

from __future__ import annotations

import html as html_lib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shared.domain.exceptions import NotificationError

from .backends import Notifier, get_notifier

if TYPE_CHECKING:  # pragma: no cover
    from apps.contributions.models import Contribution
    from apps.kitties.models import Kitty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    subject: str
    body: str
    html: str | None = None


# ============================================================================
# DELIVERY
# ============================================================================

def deliver(
    notifier: Notifier,
    recipient: str,
    subject: str,
    body: str,
    *,
    html: str | None = None,
) -> bool:
    """
    Send one message and report the outcome instead of raising.

    Returns:
        bool: True if the notifier accepted the message
    """
    try:
        notifier.send(recipient, subject, body, html=html)
    except NotificationError as e:
        logger.error(f"Notification to {recipient} failed ({subject}): {e.detail}")
        return False
    except Exception as e:
        logger.error(f"Notifier crashed sending to {recipient} ({subject}): {e}", exc_info=True)
        return False
    return True


def dispatch_notification(
    recipient: str,
    subject: str,
    body: str,
    *,
    html: str | None = None,
    notifier: Notifier | None = None,
) -> None:
    """
    Fire-and-forget delivery of a confirmation message.

    Without an injected notifier the message goes to the
    ``notifications.send_notification`` Celery task; the caller never waits
    for (or learns) the outcome, which only shows up in the logs. An injected
    notifier is used inline through :func:`deliver`.
    """
    if notifier is not None:
        deliver(notifier, recipient, subject, body, html=html)
        return

    from .tasks import send_notification

    try:
        send_notification.delay(recipient, subject, body, html)
    except Exception as e:
        logger.error(f"Could not enqueue notification to {recipient} ({subject}): {e}", exc_info=True)


def send_message(notifier: Notifier | None, recipient: str, message: Message) -> None:
    dispatch_notification(
        recipient,
        message.subject,
        message.body,
        html=message.html,
        notifier=notifier,
    )


# ============================================================================
# MESSAGES
# ============================================================================

def kitty_created_message(kitty: "Kitty") -> Message:
    subject = f"Your kitty '{kitty.name}' has been created"
    maturity = kitty.maturity_date.strftime("%d.%m.%Y")

    body = (
        f"Hello,\n\n"
        f"Your kitty \"{kitty.name}\" is ready to receive contributions.\n\n"
        f"Address: {kitty.address}\n"
        f"Type: {kitty.kitty_type}\n"
        f"Beneficiaries: {kitty.beneficiary_count}\n"
        f"Matures on: {maturity}\n\n"
        f"Share the address with your group so they can contribute.\n\n"
        f"Best regards,\nThe VaultFund Team"
    )

    name, address, kitty_type = (html_lib.escape(v) for v in (kitty.name, kitty.address, kitty.kitty_type))
    html = f"""
    <html>
    <body>
        <h2>Your kitty is ready!</h2>
        <p><strong>{name}</strong> can now receive contributions.</p>
        <ul>
            <li><strong>Address:</strong> {address}</li>
            <li><strong>Type:</strong> {kitty_type}</li>
            <li><strong>Beneficiaries:</strong> {kitty.beneficiary_count}</li>
            <li><strong>Matures on:</strong> {maturity}</li>
        </ul>
        <p>Share the address with your group so they can contribute.</p>
        <p>Best regards,<br>The VaultFund Team</p>
    </body>
    </html>
    """

    return Message(subject=subject, body=body, html=html)


def contribution_received_message(contribution: "Contribution") -> Message:
    subject = f"Contribution received for kitty {contribution.kitty_address}"

    body = (
        f"Hello {contribution.contributor_name},\n\n"
        f"We have recorded your contribution of {contribution.amount:,.2f} "
        f"to kitty {contribution.kitty_address}.\n"
        f"Reference: {contribution.transaction_ref}\n"
        f"Status: {contribution.get_status_display()}\n\n"
        f"You will receive a daily summary of the kitty's contributions.\n\n"
        f"Best regards,\nThe VaultFund Team"
    )

    return Message(subject=subject, body=body)


def welcome_message(name: str) -> Message:
    body = (
        f"Hello {name},\n\n"
        f"Welcome to VaultFund! We are excited to have you on board. "
        f"VaultFund is a group savings management platform that enhances "
        f"transparency by allowing everyone to track and manage their savings "
        f"in a seamless and secure way.\n\n"
        f"We look forward to your participation!\n\n"
        f"Best regards,\nThe VaultFund Team"
    )
    return Message(subject="Welcome to VaultFund", body=body)


def send_welcome_email(name: str, email: str, *, notifier: Notifier | None = None) -> None:
    """
    Send the welcome mail synchronously.

    Unlike confirmations, the mail is the whole point of this operation, so a
    failure propagates as NotificationError.
    """
    message = welcome_message(name)
    (notifier or get_notifier()).send(email, message.subject, message.body, html=message.html)
    logger.info(f"Welcome email sent to {email}")
