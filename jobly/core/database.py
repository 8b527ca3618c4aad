from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from jobly.core.config import settings
from jobly.core.store import Store

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW
)

# Shared store client; each statement checks a connection out of the pool
store = Store(engine)

# Base class for table definitions (DDL only, queries go through the store)
Base = declarative_base()


def get_store() -> Store:
    """
    Dependency returning the store client.
    Used in FastAPI endpoints with Depends(get_store)
    """
    return store


def init_db():
    """
    Register table definitions on Base.metadata.

    Tables are created by create_tables.py, not at startup.
    """
    from jobly.models import company, job, user  # noqa: F401
