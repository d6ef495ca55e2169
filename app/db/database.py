import logging
from typing import Optional

import motor.motor_asyncio
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import Settings

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None
_db: Optional[AsyncIOMotorDatabase] = None


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


async def connect(settings: Settings) -> None:
    """Open the shared Motor client; a failed ping is logged, not fatal."""
    global _client, _db
    _client = motor.motor_asyncio.AsyncIOMotorClient(
        settings.MONGO_URI,
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=6000,
    )
    _db = _client[settings.MONGO_DB]
    try:
        await _client.admin.command("ping")
        logger.info("Mongo connected to %s", settings.MONGO_DB)
    except Exception as e:
        logger.warning("Mongo ping at startup failed: %s", e)


async def disconnect() -> None:
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
