"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from gut_insights.config import Settings
from gut_insights.services.insights import EventRepository
from gut_insights.services.stats import StatsService

BASE = datetime(2025, 1, 15, 8, 0, tzinfo=UTC)


def at(hours: float, base: datetime = BASE) -> datetime:
    """Return a timestamp offset from the base by a number of hours."""
    return base + timedelta(hours=hours)


def hours_from(hours: float, base: datetime = BASE) -> str:
    """Return an ISO timestamp offset from the base by a number of hours."""
    return at(hours, base).isoformat()


def meal(
    timestamp: object, ingredients: list[str], confidence: float = 1.0
) -> dict[str, object]:
    """Build a raw meal record with a single food."""
    return {
        "timestamp": timestamp,
        "foods": [
            {"name": "test food", "ingredients": ingredients, "confidence": confidence}
        ],
    }


def poop(
    timestamp: object, severity: str | None = "4", symptoms: list[str] | None = None
) -> dict[str, object]:
    """Build a raw bowel-movement record."""
    return {"timestamp": timestamp, "severity": severity, "symptoms": symptoms or []}


@dataclass
class InMemoryEventRepository(EventRepository):
    """In-memory event repository for tests."""

    meals: dict[UUID, list[dict[str, object]]] = field(default_factory=dict)
    poops: dict[UUID, list[dict[str, object]]] = field(default_factory=dict)
    queries: list[tuple[str, datetime, datetime]] = field(default_factory=list)

    def list_meals(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[object]:
        self.queries.append(("meals", start, end))
        return _within(self.meals.get(user_id, []), start, end)

    def list_poops(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[object]:
        self.queries.append(("poops", start, end))
        return _within(self.poops.get(user_id, []), start, end)


def _within(
    records: list[dict[str, object]], start: datetime, end: datetime
) -> list[object]:
    # Unparseable timestamps are passed through for the service to reject.
    return [
        record
        for record in records
        if not isinstance(record["timestamp"], datetime)
        or start <= record["timestamp"] <= end
    ]


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("gut_insights")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def stats_service(settings: Settings) -> StatsService:
    return StatsService(settings)


@pytest.fixture
def event_repository() -> InMemoryEventRepository:
    return InMemoryEventRepository()
