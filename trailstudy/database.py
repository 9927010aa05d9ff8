from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from trailstudy.models.base import Base


def create_session_factory(database_url: str) -> sessionmaker:
    """Create the engine for ``database_url`` and return a session factory.

    Tables are created on first use. In-memory SQLite databases share a single
    connection so every session sees the same data.
    """
    engine_kwargs = {}
    if database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, **engine_kwargs)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)
