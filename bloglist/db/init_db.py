import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from bloglist.db.session import engine as default_engine
from bloglist.db.base import Base

logger = logging.getLogger("bloglist")


def create_all_tables(engine: Engine = default_engine) -> bool:
    try:
        existing_tables = inspect(engine).get_table_names()

        Base.metadata.create_all(bind=engine)

        new_tables = set(inspect(engine).get_table_names()) - set(existing_tables)
        if new_tables:
            logger.info(f"Created new tables: {new_tables}")

        return True
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        return False
