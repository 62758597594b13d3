from datetime import datetime, timezone
from typing import List

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from app.core.errors import StorageError
from app.schemas.contact import Contact, ContactIn

# Newest first; ObjectIds grow with insertion order so they break createdAt ties
_NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def _now_ms() -> datetime:
    # MongoDB keeps milliseconds, so trim here to match what a later read returns
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


class ContactStore:
    """Persistence for contact submissions, backed by one MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    @property
    def collection_name(self) -> str:
        return self._collection.name

    @property
    def database_name(self) -> str:
        return self._collection.database.name

    async def ensure_indexes(self) -> None:
        try:
            await self._collection.create_index([("createdAt", DESCENDING)])
        except PyMongoError as exc:
            raise StorageError(f"create_index on {self.collection_name} failed: {exc}") from exc

    async def ping(self) -> None:
        try:
            await self._collection.database.command("ping")
        except PyMongoError as exc:
            raise StorageError(f"ping failed: {exc}") from exc

    async def create(self, data: ContactIn) -> Contact:
        doc = {**data.model_dump(), "createdAt": _now_ms()}
        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as exc:
            raise StorageError(f"insert into {self.collection_name} failed: {exc}") from exc
        doc["_id"] = result.inserted_id
        return Contact.from_document(doc)

    async def list_recent(self) -> List[Contact]:
        try:
            cursor = self._collection.find({}).sort(_NEWEST_FIRST)
            docs = await cursor.to_list(length=None)
        except PyMongoError as exc:
            raise StorageError(f"find on {self.collection_name} failed: {exc}") from exc
        return [Contact.from_document(d) for d in docs]
