"""Publish/subscribe over table write events, kept in process."""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

__all__ = ["ChangeEvent", "ChangeFeed", "Subscription", "change_feed"]

logger = logging.getLogger(__name__)

EventType = Literal["INSERT", "UPDATE", "DELETE"]

DEFAULT_QUEUE_SIZE = 100


@dataclass(frozen=True)
class ChangeEvent:
    """A committed write to one table."""

    table: str
    event_type: EventType
    new: dict[str, Any] | None
    old: dict[str, Any] | None = None
    commit_timestamp: datetime = field(
        default_factory=lambda: datetime.now(UTC).replace(tzinfo=None)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "table": self.table,
            "eventType": self.event_type,
            "new": self.new,
            "old": self.old,
            "commitTimestamp": self.commit_timestamp.isoformat(),
        }


class Subscription:
    """Queue of change events for one table, optionally filtered by event type."""

    def __init__(self, table: str, event_types: Iterable[str] | None, max_size: int):
        self.table = table
        self.event_types = frozenset(event_types) if event_types else None
        self._queue: asyncio.Queue[ChangeEvent] = asyncio.Queue(maxsize=max_size)

    def matches(self, event: ChangeEvent) -> bool:
        if event.table != self.table:
            return False
        return self.event_types is None or event.event_type in self.event_types

    def offer(self, event: ChangeEvent) -> None:
        """Enqueue without blocking, dropping the oldest event when full."""
        if self._queue.full():
            self._queue.get_nowait()
            logger.warning(f"Change feed subscriber on '{self.table}' lagging, dropped an event")
        self._queue.put_nowait(event)

    async def get(self) -> ChangeEvent:
        return await self._queue.get()

    def __aiter__(self) -> AsyncIterator[ChangeEvent]:
        return self

    async def __anext__(self) -> ChangeEvent:
        return await self._queue.get()


class ChangeFeed:
    """Fan-out of change events to subscribers keyed by table and event type."""

    def __init__(self, max_queue_size: int = DEFAULT_QUEUE_SIZE):
        self.max_queue_size = max_queue_size
        self._subscriptions: list[Subscription] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def publish(
        self,
        table: str,
        event_type: EventType,
        record: dict[str, Any] | None,
        old: dict[str, Any] | None = None,
    ) -> ChangeEvent:
        """Deliver an event to every matching subscription. Never blocks."""
        event = ChangeEvent(table=table, event_type=event_type, new=record, old=old)
        for subscription in list(self._subscriptions):
            if subscription.matches(event):
                subscription.offer(event)
        return event

    @asynccontextmanager
    async def subscribe(
        self,
        table: str,
        event_types: Iterable[str] | None = None,
    ) -> AsyncIterator[Subscription]:
        """Subscribe to events on ``table`` for the duration of the context."""
        subscription = Subscription(table, event_types, self.max_queue_size)
        self._subscriptions.append(subscription)
        logger.info(f"Change feed subscriber added: table={table}, events={event_types or '*'}")
        try:
            yield subscription
        finally:
            self._subscriptions.remove(subscription)
            logger.info(f"Change feed subscriber removed: table={table}")


# Shared by the service layer
change_feed = ChangeFeed()
