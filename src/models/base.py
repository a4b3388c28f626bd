from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from src.config import settings

Base = declarative_base()


def build_engine(database_url: str):
    if not database_url.startswith("sqlite"):
        return create_engine(database_url)

    # In-memory SQLite needs a single shared connection to keep its data
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, connect_args={'check_same_thread': False})


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
