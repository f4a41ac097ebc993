import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from blogcms.config import settings

logger = logging.getLogger(__name__)


def create_client(url: str | None = None) -> AsyncIOMotorClient:
    """
    Build the process-wide MongoDB client.

    Created once at startup and shared by every repository; pooling and
    retry behaviour are the driver's defaults.
    """
    client = AsyncIOMotorClient(
        url or settings.MONGODB_URL,
        serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    )
    logger.info("MongoDB client created for database %r", settings.MONGODB_DATABASE)
    return client


def get_database(client: AsyncIOMotorClient, name: str | None = None) -> AsyncIOMotorDatabase:
    return client[name or settings.MONGODB_DATABASE]
