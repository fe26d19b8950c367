"""Database Setup."""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from location_directory.setup.config import get_settings

settings = get_settings()

# SQLAlchemy Engine (연결은 첫 쿼리 시점에 생성됨)
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_pre_ping=True,
)

# Session Factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """DB 세션을 반환합니다."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
