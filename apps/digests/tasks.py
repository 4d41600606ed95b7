"""Celery tasks for the contribution digest."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import run_digest

logger = logging.getLogger(__name__)


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="digests.send_contribution_digests")
def send_contribution_digests() -> dict:
    """
    Daily contribution digest.

    Scheduled once a day at the start of the day (project timezone). A run
    that fails to start is not retried; the next scheduled run picks up.

    Returns:
        dict: {"kitties", "skipped", "sent", "failed", "failures"}
    """
    report = run_digest()

    logger.info(
        f"Contribution digest finished: {report.kitties} kitties, {report.skipped} skipped, "
        f"{report.sent} sent, {report.failed} failed"
    )
    if report.failed:
        logger.warning(f"Digest deliveries failed: {', '.join(report.failures)}")

    return report.as_dict()
