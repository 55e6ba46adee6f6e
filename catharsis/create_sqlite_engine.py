from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine


def create_engine(url: str) -> AsyncEngine:
    """Create the async engine for the ticket database.

    SQLite files get a busy timeout so concurrent writers wait for the lock
    and then hit the unique constraint instead of failing with "database is locked".
    """
    if url.startswith("sqlite"):
        return create_async_engine(url=url, echo=False, connect_args={"timeout": 15})
    return create_async_engine(url, pool_size=20, max_overflow=20)
