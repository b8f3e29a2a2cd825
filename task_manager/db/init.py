"""Initialize database tables."""
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

# Imported so their tables are registered on SQLModel.metadata
from task_manager.models.task import Task  # noqa: F401
from task_manager.models.user import User  # noqa: F401
from task_manager.utils.logger import get_logger

logger = get_logger("task_manager.db")


def init_db(engine: Engine):
    """Create all tables that do not exist yet."""
    logger.info("Creating database tables")
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready", tables=sorted(SQLModel.metadata.tables))


if __name__ == "__main__":
    from task_manager.config import Settings
    from task_manager.db.config import create_db_engine

    init_db(create_db_engine(Settings.from_env().database_url))
