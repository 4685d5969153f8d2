"""Test helpers: reference instants and an in-memory ping store."""
import bisect
from dataclasses import dataclass
from datetime import datetime, timedelta

NOW = datetime(2024, 1, 1, 12, 0, 0)

# (offset in seconds from NOW, is_up, monitor name)
CHECK1_PINGS = [
    (-3, False, "dummy1"),
    (-2, False, "dummy2"),
    (-1, True, "dummy3"),
    (0, True, "dummy4"),
    (1, True, "dummy5"),
    (2, False, "dummy6"),
    (3, True, "dummy7"),
]


def at(seconds: float) -> datetime:
    """Instant relative to NOW."""
    return NOW + timedelta(seconds=seconds)


@dataclass(frozen=True)
class Sample:
    """Minimal ping-like value."""
    timestamp: object
    is_up: bool
    name: str = ""


class FakePingStore:
    """Sorted in-memory ping store with the same contract as SqlPingStore."""

    def __init__(self, pings_by_check=None):
        # sorted() is stable, so ties keep insertion order
        self.pings = {
            check_id: sorted(pings, key=lambda p: p.timestamp)
            for check_id, pings in (pings_by_check or {}).items()
        }
        self.calls = []

    def _keys(self, check_id):
        return [p.timestamp for p in self.pings.get(check_id, [])]

    async def find_latest_at_or_before(self, check_id, timestamp):
        self.calls.append(("latest", check_id, timestamp))
        index = bisect.bisect_right(self._keys(check_id), timestamp)
        return self.pings[check_id][index - 1] if index else None

    async def find_in_range(self, check_id, start, end):
        self.calls.append(("range", check_id, start, end))
        keys = self._keys(check_id)
        low = bisect.bisect_left(keys, start)
        high = bisect.bisect_right(keys, end)
        return self.pings.get(check_id, [])[low:high]
