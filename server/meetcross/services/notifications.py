from __future__ import annotations

import logging

from meetcross.models.announcement import Announcement

logger = logging.getLogger(__name__)


def notify_announcement_emailed(announcement: Announcement, recipients: int) -> None:
    """Placeholder hook for announcement email delivery."""

    logger.info(
        "announcement_email_requested",
        extra={
            "announcement_id": announcement.id,
            "target": announcement.target,
            "target_member_id": announcement.target_member_id,
            "recipients": recipients,
        },
    )
