from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine
from app.core.config import settings


def _engine_options(url: str) -> dict:
    if not url.startswith('sqlite'):
        return {'pool_pre_ping': True}
    options = {'connect_args': {'check_same_thread': False}}
    if ':memory:' in url or url.rstrip('/') == 'sqlite:':
        # one shared connection, otherwise every checkout sees an empty database
        options['poolclass'] = StaticPool
    return options


engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))


def get_session():
    with Session(engine) as session:
        yield session
