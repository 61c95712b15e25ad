from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional


def blank_to_none(value: Any) -> Any:
    """Form posts send empty strings for unset optional fields."""

    if isinstance(value, str) and not value.strip():
        return None
    return value


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored without zone information, in UTC."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
