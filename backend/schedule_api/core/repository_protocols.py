"""Boundary Protocols — contract between the route handlers and the document store.

Invariants:
    - Handlers NEVER import the MongoDB driver — they only see ScheduleStore
    - Every store method is a single atomic document operation (no batching, no retry)
    - Result descriptors mirror the driver's counts so handlers can decide 404 vs 200

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Frozen dataclasses for results: handlers read counts, never mutate them
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class InsertResult:
    """Outcome of insert_one."""
    inserted_id: str
    acknowledged: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"acknowledged": self.acknowledged, "insertedId": self.inserted_id}


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of update_one / set_completed."""
    matched_count: int
    modified_count: int


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of delete_one."""
    deleted_count: int


class ScheduleStore(Protocol):
    """Contract for schedule persistence — implemented by infrastructure/database.py.

    Documents are returned with `id` as a hex string and no `_id` key.
    Methods taking an identifier raise InvalidScheduleIdError on malformed ids
    and StoreError on any driver failure.
    """
    async def find_all(self) -> list[dict[str, Any]]: ...
    async def insert_one(self, fields: dict[str, Any]) -> InsertResult: ...
    async def update_one(
        self, schedule_id: str, fields: dict[str, Any],
    ) -> UpdateResult: ...
    async def set_completed(self, schedule_id: str) -> UpdateResult: ...
    async def delete_one(self, schedule_id: str) -> DeleteResult: ...
    async def ping(self) -> bool: ...
