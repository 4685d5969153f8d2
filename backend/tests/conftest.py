"""Shared test fixtures: in-memory database and seeded checks."""
import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from uptracker.database import init_db, session_factory
from uptracker.models import Check, Ping

from helpers import CHECK1_PINGS, FakePingStore, at


@pytest.fixture
def fake_store_factory():
    return FakePingStore


@pytest.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    await init_db(engine)

    async with session_factory(engine)() as db:
        yield db

    await engine.dispose()


@pytest.fixture
async def checks(session):
    """check1 with the reference ping sequence, check2 without any ping."""
    check1 = Check(name="check1", url="http://example.com")
    check2 = Check(name="check2")
    session.add_all([check1, check2])
    await session.flush()

    for offset, is_up, name in CHECK1_PINGS:
        session.add(Ping(
            check_id=check1.id,
            timestamp=at(offset),
            is_up=is_up,
            response_time_ms=100,
            monitor_name=name,
        ))
    await session.commit()
    return check1, check2
