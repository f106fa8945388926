from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from .config import settings


def engine_options(url: str) -> dict:
    """Connection pool options for the given database URL"""
    options = {"echo": settings.DEBUG, "future": True}
    if make_url(url).get_backend_name() == "sqlite":
        # SQLite picks its own pool class; sizing arguments are rejected
        return options

    options.update(
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,  # Verify connections before using them
        pool_recycle=settings.DB_POOL_RECYCLE,
    )
    return options


engine = create_async_engine(settings.DB_URL, **engine_options(settings.DB_URL))

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Create declarative base
Base = declarative_base()


# Dependency to get DB session
async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
