"""Uptime calculator - reconstructs uptime periods of a check from its pings.

The state of a check at any instant is the is_up value of its most recent
ping at or before that instant. Before the first ping ever recorded the check
is considered down (NO_HISTORY_STATE).

Periods are closed intervals. A down ping closes the running period at its own
timestamp, so availability is credited up to the instant an outage is first
observed. A check still up at the end of the window gets a period ending at
the window end, which can be zero-length when it came up exactly at the end.
"""
import enum
import logging
from datetime import datetime
from typing import Iterable, List, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidWindowError
from ..models import Check, Ping
from .periods import Period
from .ping_store import PingStore, SqlPingStore

logger = logging.getLogger(__name__)

# State assumed when a check has no ping at or before an instant
NO_HISTORY_STATE = False


class RunState(enum.Enum):
    DOWN = "down"
    UP = "up"

    @classmethod
    def of(cls, is_up: bool) -> "RunState":
        return cls.UP if is_up else cls.DOWN


class UptimeRunBuilder:
    """State machine turning ordered state events into uptime periods.

    Opens a run on a DOWN -> UP transition and closes it on UP -> DOWN.
    Events that repeat the current state are absorbed, so consecutive up
    pings never split a run. A run reopened at the instant the previous one
    closed (tied pings) resumes that run, so emitted periods never touch.
    """
    
    def __init__(self, start, initial_state: bool):
        self.state = RunState.DOWN
        self.open_since = None
        self.periods: List[Period] = []
        self.feed(start, initial_state)
    
    def feed(self, time, is_up: bool):
        """Apply a state event observed at the given instant."""
        new_state = RunState.of(is_up)
        if self.state is RunState.DOWN and new_state is RunState.UP:
            if self.periods and self.periods[-1].end == time:
                # Down and back up at one instant: the run never stopped
                self.open_since = self.periods.pop().start
            else:
                self.open_since = time
        elif self.state is RunState.UP and new_state is RunState.DOWN:
            self.periods.append(Period(self.open_since, time))
            self.open_since = None
        self.state = new_state
    
    def close(self, end) -> List[Period]:
        """Apply the closing marker and return the emitted periods."""
        if self.state is RunState.UP:
            self.periods.append(Period(self.open_since, end))
            self.open_since = None
            self.state = RunState.DOWN
        return list(self.periods)


def reconstruct_periods(initial_state: bool, pings: Iterable, start, end) -> List[Period]:
    """Build the uptime periods of a window from already fetched pings.

    Args:
        initial_state: State at the window start (from the latest ping at or
            before it, or NO_HISTORY_STATE)
        pings: Objects with timestamp and is_up, ascending, all within
            [start, end]
        start: Window start
        end: Window end

    Returns:
        Ascending, non-overlapping list of periods inside [start, end]

    Raises:
        InvalidWindowError: If start > end
    """
    if start > end:
        raise InvalidWindowError(start, end)
    
    builder = UptimeRunBuilder(start, initial_state)
    for ping in pings:
        builder.feed(ping.timestamp, ping.is_up)
    return builder.close(end)


class UptimeCalculator:
    """Uptime computations for a single check.

    Holds no state besides the check id and the store, and does no I/O until
    a query is made. Store errors propagate unchanged; retries are up to the
    caller.
    """
    
    def __init__(self, check: Union[Check, int], store: PingStore):
        self.check_id = check.id if isinstance(check, Check) else check
        self.store = store
    
    @classmethod
    def for_session(cls, check: Union[Check, int], session: AsyncSession) -> "UptimeCalculator":
        """Create a calculator reading pings through a database session."""
        return cls(check, SqlPingStore(session))
    
    async def latest_ping_at_or_before(self, timestamp: datetime) -> Optional[Ping]:
        """Get the ping with the greatest timestamp <= the given one, if any."""
        return await self.store.find_latest_at_or_before(self.check_id, timestamp)
    
    async def uptime_periods(self, start: datetime, end: datetime) -> List[Period]:
        """Get the uptime periods of the check within [start, end].

        Raises:
            InvalidWindowError: If start > end (before any store access)
        """
        if start > end:
            raise InvalidWindowError(start, end)
        
        previous = await self.latest_ping_at_or_before(start)
        initial_state = previous.is_up if previous is not None else NO_HISTORY_STATE
        pings = await self.store.find_in_range(self.check_id, start, end)
        
        periods = reconstruct_periods(initial_state, pings, start, end)
        logger.debug(
            f"Check {self.check_id}: {len(periods)} uptime periods from "
            f"{len(pings)} pings in [{start}, {end}]"
        )
        return periods
