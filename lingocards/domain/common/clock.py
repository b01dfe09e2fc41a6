"""Wall clock helpers. All persisted timestamps are epoch milliseconds."""

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], int]


def now_millis() -> int:
    """Current UTC time in epoch milliseconds."""
    return int(datetime.now(UTC).timestamp() * 1000)
