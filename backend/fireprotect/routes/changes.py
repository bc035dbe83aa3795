"""Server-Sent Events stream of table write events.

SSE event types are the change kinds (INSERT, UPDATE, DELETE); the data is
the change event as JSON. A ``ping`` comment is sent when the feed is idle.
"""

import asyncio
import json
import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from fireprotect.dependencies import get_current_user_id
from fireprotect.services.change_feed import ChangeEvent, change_feed

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/changes", tags=["changes"])

KEEPALIVE_SECONDS = 15

Table = Literal["alerts", "locations", "profiles", "location_requests"]
EventType = Literal["INSERT", "UPDATE", "DELETE"]


def sse_event(event: ChangeEvent) -> str:
    """Format a change event as an SSE event."""
    return f"event: {event.event_type}\ndata: {json.dumps(event.to_dict())}\n\n"


@router.get("")
async def stream_changes(
    request: Request,
    table: Table = Query("alerts", description="Table to watch"),
    event: list[EventType] | None = Query(None, description="Event types (repeatable)"),
    user_id: str = Depends(get_current_user_id),
):
    """Stream change events for one table until the client disconnects."""
    logger.info(f"Change stream opened: user={user_id}, table={table}, events={event or '*'}")

    async def event_stream():
        async with change_feed.subscribe(table, event) as subscription:
            while not await request.is_disconnected():
                try:
                    async with asyncio.timeout(KEEPALIVE_SECONDS):
                        change = await subscription.get()
                except TimeoutError:
                    yield ": ping\n\n"
                    continue
                yield sse_event(change)
        logger.info(f"Change stream closed: user={user_id}, table={table}")

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
