"""Shared fixtures: throwaway SQLite database, API client, users and locations."""

import os
import tempfile

# Point the engine and log files at a scratch directory before fireprotect is imported
_scratch_dir = tempfile.mkdtemp(prefix="fireprotect-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_scratch_dir, "test.db")
os.environ["LOG_DIR"] = os.path.join(_scratch_dir, "logs")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from fireprotect.database import async_session, create_tables, drop_tables, engine  # noqa: E402
from fireprotect.dependencies import get_alert_evaluator, get_sensor_gateway  # noqa: E402
from fireprotect.main import app  # noqa: E402
from fireprotect.models import Alert, Location, Profile  # noqa: E402
from fireprotect.schemas import SensorReading  # noqa: E402
from fireprotect.services.alert_evaluator import AlertEvaluator  # noqa: E402
from fireprotect.services.auth_service import issue_token  # noqa: E402
from fireprotect.services.change_feed import ChangeFeed  # noqa: E402


def make_reading(**overrides) -> SensorReading:
    """A reading within every threshold unless overridden."""
    values = {
        "temperature": 22.0,
        "humidity": 55.0,
        "gas": 120.0,
        "flame": "1",
        "pir": "1",
        "timestamp": "2024-01-15T10:30:00Z",
    }
    values.update(overrides)
    return SensorReading(**values)


class FakeGateway:
    """Sensor gateway returning canned readings."""

    def __init__(self, reading: SensorReading | None = None, history: list[SensorReading] | None = None):
        self.reading = reading
        self.history_readings = history or []
        self.latest_calls: list[str] = []

    async def latest(self, location):
        self.latest_calls.append(location.name)
        return self.reading

    async def history(self, location, results=100):
        return self.history_readings[:results]


@pytest.fixture
async def reset_database():
    """Fresh schema per test."""
    await drop_tables()
    await create_tables()
    yield
    await engine.dispose()


@pytest.fixture
async def session(reset_database):
    async with async_session() as session:
        yield session


@pytest.fixture
def feed() -> ChangeFeed:
    return ChangeFeed()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway(reading=make_reading())


@pytest.fixture
def evaluator(gateway, feed) -> AlertEvaluator:
    return AlertEvaluator(gateway=gateway, deduplicate=False, feed=feed)


@pytest.fixture
async def client(reset_database, gateway, evaluator):
    """API client with the sensor gateway and evaluator swapped for fakes."""
    app.dependency_overrides[get_sensor_gateway] = lambda: gateway
    app.dependency_overrides[get_alert_evaluator] = lambda: evaluator
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def location(session) -> Location:
    """Sensor-enabled location."""
    location = Location(
        name="Okhla Industrial Area",
        region="Delhi",
        latitude=28.5355,
        longitude=77.2710,
        thingspeak_channel_id="1234567",
        thingspeak_read_key="READKEY",
    )
    session.add(location)
    await session.commit()
    return location


@pytest.fixture
async def offline_location(session) -> Location:
    """Location without ThingSpeak credentials."""
    location = Location(name="Sanjay Van", region="Delhi", latitude=28.52, longitude=77.19)
    session.add(location)
    await session.commit()
    return location


@pytest.fixture
async def alert(session, location) -> Alert:
    alert = Alert(
        location_id=location.id,
        alert_type="fire",
        severity="critical",
        status="active",
        sensor_values=make_reading(flame="0").model_dump(),
    )
    session.add(alert)
    await session.commit()
    return alert


async def _user_token(session, user_id: str, user_type: str) -> str:
    session.add(Profile(user_id=user_id, full_name=f"Test {user_type}", user_type=user_type))
    await session.commit()
    return await issue_token(session, user_id)


@pytest.fixture
async def authority_token(session) -> str:
    return await _user_token(session, "authority-user", "authority")


@pytest.fixture
async def civilian_token(session) -> str:
    return await _user_token(session, "civilian-user", "civilian")


@pytest.fixture
def authority_headers(authority_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {authority_token}"}


@pytest.fixture
def civilian_headers(civilian_token) -> dict[str, str]:
    return {"Authorization": f"Bearer {civilian_token}"}
