"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lingocards.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL.startswith("sqlite"):
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        _engine = create_engine(
            settings.DATABASE_URL,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    """Get session factory (returns singleton)."""
    if _session_factory is None:
        initialize_database(settings or get_settings())

    if _session_factory is None:
        raise RuntimeError("Failed to initialize database session factory.")

    return _session_factory


def create_tables() -> None:
    """Create the storage tables if they do not exist yet."""
    # Registers the models on Base.metadata
    import lingocards.models  # noqa: F401, PLC0415

    Base.metadata.create_all(bind=get_engine())


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
