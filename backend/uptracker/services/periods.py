"""Uptime period value type, period list merging and availability summaries."""
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Iterable, Iterator, List, Sequence

from ..exceptions import InvalidPeriodError, InvalidWindowError
from ..schemas.report import UptimeSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Period:
    """Closed interval [start, end] during which a check is considered up.

    Instants may be datetimes or plain numbers (epoch milliseconds), as long
    as a single list does not mix them. Zero-length periods are valid.
    """
    start: Any
    end: Any

    def __post_init__(self):
        try:
            inverted = self.start > self.end
        except TypeError:
            raise InvalidPeriodError(
                f"Period bounds are not comparable: {self.start!r}, {self.end!r}"
            ) from None
        if inverted:
            raise InvalidPeriodError(f"Period start {self.start!r} is after end {self.end!r}")

    def __iter__(self) -> Iterator[Any]:
        yield self.start
        yield self.end

    @classmethod
    def coerce(cls, value) -> "Period":
        """Build a Period from a Period or a [start, end] pair."""
        if isinstance(value, Period):
            return value
        if isinstance(value, (str, bytes)):
            raise InvalidPeriodError(f"Expected a [start, end] pair, got {value!r}")
        try:
            start, end = value
        except (TypeError, ValueError):
            raise InvalidPeriodError(f"Expected a [start, end] pair, got {value!r}") from None
        return cls(start, end)

    @property
    def duration(self):
        return self.end - self.start

    def as_list(self) -> list:
        return [self.start, self.end]


def _normalized(periods: Iterable, index: int) -> Iterator[Period]:
    """Coerce one period list, failing on overlaps or descending order."""
    previous = None
    for raw in periods:
        period = Period.coerce(raw)
        if previous is not None and period.start < previous.end:
            raise InvalidPeriodError(
                f"Period list {index} is not ascending and non-overlapping: "
                f"{previous.as_list()} followed by {period.as_list()}"
            )
        previous = period
        yield period


def flatten_periods(period_lists: Iterable[Iterable]) -> List[Period]:
    """Merge several period lists into one normalized list.

    Each inner list must already be ascending and non-overlapping. The outer
    order is trusted to be chronological and is not re-sorted. Periods that
    overlap or share an endpoint are fused:

        [[[1, 2], [4, 5]], [[5, 7]]] -> [[1, 2], [4, 7]]

    Raises:
        InvalidPeriodError: If a period has start > end, or an inner list is
            not ascending and non-overlapping.
    """
    merged: List[Period] = []
    current = None
    for index, periods in enumerate(period_lists):
        for period in _normalized(periods, index):
            if current is None:
                current = period
            elif period.start <= current.end:
                if period.end > current.end:
                    current = Period(current.start, period.end)
            else:
                merged.append(current)
                current = period
    if current is not None:
        merged.append(current)
    return merged


def _to_ms(delta) -> float:
    if isinstance(delta, timedelta):
        return delta.total_seconds() * 1000
    return float(delta)


def summarize_periods(periods: Sequence, start, end) -> UptimeSummary:
    """Compute uptime, downtime and availability of a period list over [start, end].

    Periods are normalized first and clipped to the window, so the result is
    correct for merged reports spanning more than the window.
    """
    if start > end:
        raise InvalidWindowError(start, end)

    clipped = []
    for period in flatten_periods([periods]):
        if period.end < start or period.start > end:
            continue
        clipped.append(Period(max(period.start, start), min(period.end, end)))

    window_ms = _to_ms(end - start)
    uptime_ms = sum(_to_ms(period.duration) for period in clipped)

    if window_ms > 0:
        availability = uptime_ms / window_ms
    else:
        # Single-instant window: up if any period covers it
        availability = 1.0 if clipped else 0.0

    logger.debug(f"Summarized {len(clipped)} periods over {window_ms}ms window")

    return UptimeSummary(
        start=start,
        end=end,
        uptime_ms=uptime_ms,
        downtime_ms=window_ms - uptime_ms,
        availability=min(availability, 1.0),
        period_count=len(clipped),
    )
