from loguru import logger
from sqlmodel import SQLModel
from app.db.session import engine
from app.core.config import settings
from app.models import address, user  # noqa: F401


def init_db(drop_all: bool = False) -> None:
    if drop_all:
        SQLModel.metadata.drop_all(engine)
    if (
        settings.DATABASE_URL.startswith('sqlite')
        or settings.ENV != 'production'
        or settings.AUTO_CREATE_TABLES
    ):
        SQLModel.metadata.create_all(engine)
        logger.debug('db.tables_ready', tables=sorted(SQLModel.metadata.tables))
