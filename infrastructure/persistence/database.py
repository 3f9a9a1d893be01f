import logging
from contextlib import asynccontextmanager
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from infrastructure.persistence.models.key_value import Base

logger = logging.getLogger(__name__)


class Database:
    """Async engine for the key-value table plus a transactional session scope."""

    def __init__(self, db_url: str):
        self.url = make_url(db_url)
        self.engine = create_async_engine(self.url)
        self.session_factory = async_sessionmaker(self.engine, expire_on_commit=False)

    async def create_tables(self) -> None:
        database = self.url.database
        if self.url.get_backend_name() == "sqlite" and database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Key-value table ready at {self.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self):
        # Commits on clean exit, rolls back if the block raises
        async with self.session_factory() as session, session.begin():
            yield session
