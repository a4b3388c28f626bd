import logging

from sqlalchemy import inspect

from src.models.base import Base, engine
# Registers the todos table on Base.metadata
from src.models.entities.todo import TodoRecord  # noqa: F401

logger = logging.getLogger(__name__)

def create_tables(bind=engine):
    Base.metadata.create_all(bind=bind)

    inspector = inspect(bind)
    tables = inspector.get_table_names()
    logger.info(f"Tables in database: {tables}")
