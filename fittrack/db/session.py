"""
Database Session Management

Provides database engine and session factory for the sql history backend.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker


def create_db_engine(database_url: str) -> Engine:
    """Create engine based on database URL."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False}
        )
    return create_engine(database_url, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# =============================================================================
# Initialization
# =============================================================================

def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    from fittrack.models.base import Base
    # Import all models to register them
    from fittrack.features.history import models  # noqa

    Base.metadata.create_all(bind=engine)
