from loguru import logger
from sqlmodel import SQLModel

import finance_tracker.models  # noqa: F401
from finance_tracker.database import engine

SQLModel.metadata.drop_all(engine)
SQLModel.metadata.create_all(engine)

logger.info("Base de datos reseteada correctamente (tablas eliminadas y recreadas).")
