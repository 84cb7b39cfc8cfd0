from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.config import get_settings

settings = get_settings()

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(database_url: str):
    """
    Create a SQLAlchemy engine for the given URL.

    File-backed SQLite and server databases get a regular connection pool,
    one connection per session, so concurrent sessions never share a
    transaction. In-memory SQLite has to share a single connection (otherwise
    every session would see its own empty database) and is therefore only
    suitable for single-threaded use such as tests.
    """
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in MEMORY_URLS:
            options["poolclass"] = StaticPool
        return create_engine(database_url, **options)

    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
