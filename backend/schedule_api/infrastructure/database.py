"""Schedule Store — MongoDB gateway over a single collection with driver error mapping.

Invariants:
    - One AsyncMongoClient per process, created in the lifespan and attached to app.state
    - Every public method is exactly one atomic document operation (no batching, caching, retry)
    - All PyMongoError exceptions mapped to StoreError (core/errors.py), logged once
      at ERROR by api/error_handlers.py; the gateway only adds a DEBUG trace
    - Malformed identifiers mapped to InvalidScheduleIdError before touching the driver
    - Documents leave the gateway with `id` (hex string) in place of `_id`

Design Decisions:
    - Store injected via FastAPI dependency reading app.state, never a module global:
      tests override get_schedule_store without patching this module
    - ServerApi v1 strict: the server rejects commands outside the stable API
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from schedule_api.config import Settings
from schedule_api.core.errors import InvalidScheduleIdError, StoreError
from schedule_api.core.repository_protocols import (
    DeleteResult, InsertResult, ScheduleStore, UpdateResult,
)

logger = logging.getLogger(__name__)


def parse_schedule_id(schedule_id: str) -> ObjectId:
    """Convert a path identifier to an ObjectId or raise InvalidScheduleIdError."""
    try:
        return ObjectId(schedule_id)
    except (InvalidId, TypeError) as e:
        raise InvalidScheduleIdError(schedule_id, str(e)) from e


def to_schedule(document: dict[str, Any]) -> dict[str, Any]:
    """Render a stored document for the API: `_id` becomes `id`."""
    schedule = {k: v for k, v in document.items() if k != "_id"}
    return {"id": str(document["_id"]), **schedule}


@contextmanager
def _map_store_errors(operation: str, schedule_id: str | None = None) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        logger.debug(
            f"Store {operation} failed: {e}",
            extra={"operation": operation, "schedule_id": schedule_id},
        )
        raise StoreError(str(e), operation) from e


class MongoScheduleStore:
    """ScheduleStore backed by a MongoDB collection."""

    def __init__(
        self, client: AsyncMongoClient, database: str, collection: str,
    ):
        self.client = client
        self.collection = client[database][collection]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoScheduleStore":
        client = AsyncMongoClient(
            settings.mongo_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        return cls(client, settings.mongo_database, settings.mongo_collection)

    async def find_all(self) -> list[dict[str, Any]]:
        with _map_store_errors("find"):
            documents = await self.collection.find().to_list()
        return [to_schedule(d) for d in documents]

    async def insert_one(self, fields: dict[str, Any]) -> InsertResult:
        with _map_store_errors("insert"):
            result = await self.collection.insert_one(dict(fields))
        return InsertResult(
            inserted_id=str(result.inserted_id), acknowledged=result.acknowledged,
        )

    async def update_one(
        self, schedule_id: str, fields: dict[str, Any],
    ) -> UpdateResult:
        oid = parse_schedule_id(schedule_id)
        with _map_store_errors("update", schedule_id):
            result = await self.collection.update_one(
                {"_id": oid}, {"$set": dict(fields)},
            )
        return UpdateResult(result.matched_count, result.modified_count)

    async def set_completed(self, schedule_id: str) -> UpdateResult:
        oid = parse_schedule_id(schedule_id)
        with _map_store_errors("complete", schedule_id):
            result = await self.collection.update_one(
                {"_id": oid}, {"$set": {"completed": True}},
            )
        return UpdateResult(result.matched_count, result.modified_count)

    async def delete_one(self, schedule_id: str) -> DeleteResult:
        oid = parse_schedule_id(schedule_id)
        with _map_store_errors("delete", schedule_id):
            result = await self.collection.delete_one({"_id": oid})
        return DeleteResult(result.deleted_count)

    async def ping(self) -> bool:
        """Check store connectivity (startup and readiness probe)."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Store ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()


def get_schedule_store(request: Request) -> ScheduleStore:
    """FastAPI dependency for the process-wide schedule store."""
    store = getattr(request.app.state, "schedule_store", None)
    if store is None:
        raise RuntimeError("Schedule store not initialized")
    return store
