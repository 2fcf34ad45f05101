"""MongoDB database connection using Motor (async driver)."""
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import settings
from app.services.store import MongoStore


logger = logging.getLogger(__name__)


class Database:
    """MongoDB database connection manager."""

    client: AsyncIOMotorClient | None = None
    db: AsyncIOMotorDatabase | None = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(settings.mongodb_url)
        self.db = self.client[settings.mongodb_db_name]
        logger.info("Connected to MongoDB: %s", settings.mongodb_db_name)

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client is not None:
            self.client.close()
            logger.info("Disconnected from MongoDB")


# Global database instance
database = Database()


async def get_store() -> MongoStore:
    """
    Dependency to get a request-scoped store.

    Each request gets its own store so a transaction session is never
    shared between two Smart-Add calls.
    """
    if database.client is None or database.db is None:
        raise RuntimeError("Database not connected")
    return MongoStore(database.client, database.db)
