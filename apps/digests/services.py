"""Contribution digest: per-kitty summaries emailed to each contributor."""

from __future__ import annotations

import html
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal

from django.utils import timezone  # type: ignore

from apps.contributions.models import Contribution
from apps.contributions.services import summarize_contributions
from apps.kitties.models import Kitty
from apps.notifications.backends import Notifier, get_notifier
from apps.notifications.services import deliver

logger = logging.getLogger(__name__)


@dataclass
class KittySummary:
    kitty: Kitty
    contributions: list[Contribution]
    total: Decimal

    @property
    def subject(self) -> str:
        return f"Contribution summary for {self.kitty.name} ({self.kitty.address})"

    def recipients(self) -> list[str]:
        """Unique contributor emails, in order of first appearance."""
        return list(dict.fromkeys(c.contributor_email for c in self.contributions))

    def as_text(self) -> str:
        lines = [
            f"Contribution summary for kitty \"{self.kitty.name}\" ({self.kitty.address})",
            "",
            f"{'Name':<25} {'Email':<30} {'Amount':>12} {'Reference':<20} Status",
        ]
        for c in self.contributions:
            lines.append(
                f"{c.contributor_name:<25} {c.contributor_email:<30} {c.amount:>12,.2f} "
                f"{c.transaction_ref:<20} {c.status}"
            )
        lines += ["", f"Total contributions: {self.total:,.2f}", "", "The VaultFund Team"]
        return "\n".join(lines)

    def as_html(self) -> str:
        rows = "".join(
            "<tr>"
            f"<td>{html.escape(c.contributor_name)}</td>"
            f"<td>{html.escape(c.contributor_email)}</td>"
            f"<td>{c.amount:,.2f}</td>"
            f"<td>{html.escape(c.transaction_ref)}</td>"
            f"<td>{html.escape(c.status)}</td>"
            "</tr>"
            for c in self.contributions
        )
        return f"""
        <html>
        <body>
            <h2>Contribution summary for {html.escape(self.kitty.name)}</h2>
            <p>Kitty address: <strong>{html.escape(self.kitty.address)}</strong></p>
            <table border="1" cellpadding="4" cellspacing="0">
                <thead>
                    <tr><th>Name</th><th>Email</th><th>Amount</th><th>Reference</th><th>Status</th></tr>
                </thead>
                <tbody>{rows}</tbody>
            </table>
            <p><strong>Total contributions:</strong> {self.total:,.2f}</p>
            <p>The VaultFund Team</p>
        </body>
        </html>
        """


@dataclass
class DigestReport:
    kitties: int = 0
    skipped: int = 0
    sent: int = 0
    failed: int = 0
    failures: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)


def build_kitty_summary(kitty: Kitty, contributions: list[Contribution]) -> KittySummary:
    return KittySummary(
        kitty=kitty,
        contributions=contributions,
        total=summarize_contributions(contributions),
    )


def start_of_today(now: datetime | None = None) -> datetime:
    local = timezone.localtime(now)
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def active_kitties(today: datetime):
    """Kitties maturing today or later. Matured kitties get no digest."""
    return Kitty.objects.filter(maturity_date__gte=today).order_by("id")


def run_digest(*, notifier: Notifier | None = None, now: datetime | None = None) -> DigestReport:
    """
    Send one summary per kitty to each of its unique contributors.

    A failed send is logged and counted; it never stops the run, which
    attempts every kitty and every contributor exactly once.
    """
    notifier = notifier or get_notifier()
    today = start_of_today(now)
    report = DigestReport()

    for kitty in active_kitties(today):
        contributions = list(
            Contribution.objects.filter(kitty_address=kitty.address).order_by("-created_at", "-id")
        )
        if not contributions:
            report.skipped += 1
            continue

        report.kitties += 1
        summary = build_kitty_summary(kitty, contributions)
        body, html_body = summary.as_text(), summary.as_html()

        for email in summary.recipients():
            if deliver(notifier, email, summary.subject, body, html=html_body):
                report.sent += 1
            else:
                report.failed += 1
                report.failures.append(f"{kitty.address}:{email}")

        logger.info(
            f"Digest for kitty {kitty.address}: {len(contributions)} contributions, "
            f"total {summary.total}, {len(summary.recipients())} recipients"
        )

    return report
