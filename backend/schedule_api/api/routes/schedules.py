"""Schedule Routes — create, list, update, complete, and delete schedule records.

Invariants:
    - Handlers hold no state between requests; everything lives in the ScheduleStore
    - Body validation (require_all) runs before identifier parsing
    - Store failures re-raised as ScheduleOperationError with the route's public message
    - matched/deleted count of 0 → ScheduleNotFoundError (404)
    - GET /schedules returns a bare array; every other route returns an Envelope

Design Decisions:
    - Store injected via Depends(get_schedule_store): no module-level client
    - Errors raised, not returned: error_handlers.py renders every ScheduleApiError
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import APIRouter, Body, Depends, status

from schedule_api.core.errors import (
    NoSchedulesFoundError, ScheduleNotFoundError, ScheduleOperationError,
    StoreError, INTERNAL_ERROR_MESSAGE,
)
from schedule_api.core.repository_protocols import ScheduleStore
from schedule_api.infrastructure.database import get_schedule_store
from schedule_api.schemas.schedule import Envelope, ScheduleFields

logger = logging.getLogger(__name__)
router = APIRouter(tags=["schedules"])


@contextmanager
def _failing_as(message: str) -> Iterator[None]:
    """Re-label StoreError (including malformed ids) with a route-specific message."""
    try:
        yield
    except StoreError as e:
        raise ScheduleOperationError(message, e) from e


@router.get("/schedules")
async def list_schedules(store: ScheduleStore = Depends(get_schedule_store)):
    """List every schedule. An empty collection is a 404, not an empty array."""
    with _failing_as("Failed to fetch schedules"):
        schedules = await store.find_all()
    if not schedules:
        raise NoSchedulesFoundError()
    return schedules


@router.post(
    "/schedule", response_model=Envelope, response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def add_schedule(
    body: ScheduleFields | None = Body(None),
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Create a schedule with completed=false."""
    fields = (body or ScheduleFields()).require_all()
    with _failing_as("Failed to add schedule"):
        result = await store.insert_one({**fields, "completed": False})
    logger.info(
        "Schedule created", extra={"schedule_id": result.inserted_id},
    )
    return Envelope(
        success=True, message="Schedule added successfully",
        data=result.to_dict(),
    )


@router.put(
    "/schedule/{schedule_id}", response_model=Envelope,
    response_model_exclude_none=True,
)
async def update_schedule(
    schedule_id: str,
    body: ScheduleFields | None = Body(None),
    store: ScheduleStore = Depends(get_schedule_store),
):
    """Replace title/day/date/time. `completed` is never touched here."""
    fields = (body or ScheduleFields()).require_all()
    with _failing_as("Failed to update schedule"):
        result = await store.update_one(schedule_id, fields)
    if result.matched_count == 0:
        raise ScheduleNotFoundError(schedule_id)
    logger.info("Schedule updated", extra={"schedule_id": schedule_id})
    return Envelope(
        success=True, message="Schedule updated successfully", data=fields,
    )


@router.patch(
    "/schedule/{schedule_id}/complete", response_model=Envelope,
    response_model_exclude_none=True,
)
async def complete_schedule(
    schedule_id: str, store: ScheduleStore = Depends(get_schedule_store),
):
    """Mark a schedule completed. Repeating the call is a no-op that still succeeds."""
    with _failing_as("Failed to mark schedule as complete"):
        result = await store.set_completed(schedule_id)
    if result.matched_count == 0:
        raise ScheduleNotFoundError(schedule_id)
    logger.info("Schedule completed", extra={"schedule_id": schedule_id})
    return Envelope(success=True, message="Schedule marked as complete")


@router.delete(
    "/schedule/{schedule_id}", response_model=Envelope,
    response_model_exclude_none=True,
)
async def delete_schedule(
    schedule_id: str, store: ScheduleStore = Depends(get_schedule_store),
):
    """Delete a schedule."""
    with _failing_as(INTERNAL_ERROR_MESSAGE):
        result = await store.delete_one(schedule_id)
    if result.deleted_count == 0:
        raise ScheduleNotFoundError(schedule_id)
    logger.info("Schedule deleted", extra={"schedule_id": schedule_id})
    return Envelope(success=True, message="Schedule deleted successfully")
