from typing import AsyncIterator, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import Settings
from framework.logging.logger import get_logger
from .sql_driver import SQLDriver

logger = get_logger("database")


class DatabaseManager:
    """Process-wide owner of the SQL driver: startup, shutdown, per-request sessions."""

    _instance: Optional["DatabaseManager"] = None

    def __init__(self, settings: Settings):
        self.settings = settings
        self.sql = SQLDriver(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @classmethod
    def get_instance(cls) -> "DatabaseManager":
        if cls._instance is None:
            from framework.config import settings
            cls._instance = cls(settings)
        return cls._instance

    async def startup(self) -> None:
        await self.sql.connect()
        if self.settings.DB_CREATE_TABLES:
            await self.sql.create_tables()
        logger.info(f"Database ready ({self.sql.engine.url.render_as_string(hide_password=True)})")

    async def shutdown(self) -> None:
        await self.sql.disconnect()
        logger.info("Database connections disposed")

    async def session(self) -> AsyncIterator[AsyncSession]:
        async for session in self.sql.get_session():
            yield session
