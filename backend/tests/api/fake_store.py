"""In-memory ScheduleStore — stands in for MongoDB in route tests.

Invariants:
    - Satisfies the ScheduleStore protocol structurally (no inheritance)
    - Identifiers parsed with the real parse_schedule_id: malformed ids fail exactly as in production
    - fail_with makes every subsequent operation raise the given StoreError
    - calls records (method, schedule_id) for every operation that reached the store

Design Decisions:
    - Documents stored keyed by ObjectId with `_id`, rendered through to_schedule like the real gateway
"""

from bson import ObjectId

from schedule_api.core.errors import StoreError
from schedule_api.core.repository_protocols import (
    DeleteResult, InsertResult, UpdateResult,
)
from schedule_api.infrastructure.database import parse_schedule_id, to_schedule


class InMemoryScheduleStore:
    """Dict-backed schedule store."""

    def __init__(self):
        self.documents: dict[ObjectId, dict] = {}
        self.calls: list[tuple[str, str | None]] = []
        self.fail_with: StoreError | None = None
        self.reachable = True
        self.closed = False

    def _check(self, method: str, schedule_id: str | None = None):
        self.calls.append((method, schedule_id))
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, **fields) -> str:
        """Insert a document directly, bypassing the API. Returns its id."""
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, "completed": False, **fields}
        return str(oid)

    def get(self, schedule_id: str) -> dict | None:
        doc = self.documents.get(ObjectId(schedule_id))
        return to_schedule(doc) if doc else None

    async def find_all(self) -> list[dict]:
        self._check("find_all")
        return [to_schedule(d) for d in self.documents.values()]

    async def insert_one(self, fields: dict) -> InsertResult:
        self._check("insert_one")
        oid = ObjectId()
        self.documents[oid] = {"_id": oid, **fields}
        return InsertResult(inserted_id=str(oid))

    async def update_one(self, schedule_id: str, fields: dict) -> UpdateResult:
        oid = parse_schedule_id(schedule_id)
        self._check("update_one", schedule_id)
        doc = self.documents.get(oid)
        if doc is None:
            return UpdateResult(0, 0)
        changed = any(doc.get(k) != v for k, v in fields.items())
        doc.update(fields)
        return UpdateResult(1, int(changed))

    async def set_completed(self, schedule_id: str) -> UpdateResult:
        oid = parse_schedule_id(schedule_id)
        self._check("set_completed", schedule_id)
        doc = self.documents.get(oid)
        if doc is None:
            return UpdateResult(0, 0)
        changed = doc.get("completed") is not True
        doc["completed"] = True
        return UpdateResult(1, int(changed))

    async def delete_one(self, schedule_id: str) -> DeleteResult:
        oid = parse_schedule_id(schedule_id)
        self._check("delete_one", schedule_id)
        return DeleteResult(1 if self.documents.pop(oid, None) else 0)

    async def ping(self) -> bool:
        return self.reachable

    async def close(self) -> None:
        self.closed = True
