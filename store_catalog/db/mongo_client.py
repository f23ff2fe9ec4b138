from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from loguru import logger
from store_catalog.core.config import get_settings

_client: AsyncIOMotorClient | None = None

async def connect_to_mongo() -> None:
    global _client
    if not _client:
        _client = AsyncIOMotorClient(get_settings().MONGODB_URI)
        logger.info(f"Mongo connected, database '{get_settings().MONGO_DB_NAME}'")

async def close_mongo_connection() -> None:
    global _client
    if _client:
        _client.close()
        _client = None
        logger.info("Mongo connection closed")

def get_database() -> AsyncIOMotorDatabase:
    if _client is None:
        raise RuntimeError("Call connect_to_mongo() first")
    return _client[get_settings().MONGO_DB_NAME]
