import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.core.errors import StartupError
from app.core.settings import Settings, require_mongo_uri

log = logging.getLogger("uvicorn.error")


async def open_client(settings: Settings) -> AsyncIOMotorClient:
    """Connect to MongoDB and make sure the server answers before serving."""
    uri = require_mongo_uri(settings)
    client = AsyncIOMotorClient(uri, tz_aware=True)
    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        log.error(f"[db] MongoDB connection error: {exc}")
        raise StartupError("could not connect to MongoDB") from exc
    log.info("[db] MongoDB connected")
    return client


def get_collection(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorCollection:
    """Pick the database named in the URI, falling back to MONGO_DB."""
    db = client.get_default_database(default=settings.mongo_db)
    return db[settings.mongo_collection]


def close_client(client: AsyncIOMotorClient) -> None:
    """Cleanly close the client and its connection pool."""
    client.close()
    log.info("[db] MongoDB connection closed")
