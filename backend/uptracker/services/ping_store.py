"""Ping store - the two reads the uptime engine needs from ping storage."""
from datetime import datetime
from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Ping


class PingStore(Protocol):
    """Read access to the pings of a check, ordered by timestamp."""

    async def find_latest_at_or_before(self, check_id: int, timestamp: datetime) -> Optional[Ping]:
        """Return the ping with the greatest timestamp <= the given one, or None."""
        ...

    async def find_in_range(self, check_id: int, start: datetime, end: datetime) -> List[Ping]:
        """Return all pings with start <= timestamp <= end, ascending."""
        ...


class SqlPingStore:
    """Ping store backed by the pings table.

    Both queries run on the (check_id, timestamp DESC) index. Pings sharing a
    timestamp are ordered by id: the latest lookup returns the highest id and
    the range fetch yields ties in ascending id order, so the most recently
    stored ping of a tie wins in both.
    """
    
    def __init__(self, session: AsyncSession):
        self.session = session
    
    async def find_latest_at_or_before(self, check_id: int, timestamp: datetime) -> Optional[Ping]:
        result = await self.session.execute(
            select(Ping)
            .where(Ping.check_id == check_id, Ping.timestamp <= timestamp)
            .order_by(Ping.timestamp.desc(), Ping.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()
    
    async def find_in_range(self, check_id: int, start: datetime, end: datetime) -> List[Ping]:
        result = await self.session.execute(
            select(Ping)
            .where(
                Ping.check_id == check_id,
                Ping.timestamp >= start,
                Ping.timestamp <= end,
            )
            .order_by(Ping.timestamp.asc(), Ping.id.asc())
        )
        return list(result.scalars().all())
