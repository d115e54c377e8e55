import os

import pytest

DEFAULT_TEST_DB_URL = "sqlite:///:memory:"
TEST_DB_URL = os.getenv("TEST_DB_URL", DEFAULT_TEST_DB_URL)
os.environ["DATABASE_URL"] = TEST_DB_URL
os.environ.setdefault("USER_ID_ON_CREATE", "ignore")

from app.core.config import settings
from app.db.init_db import init_db

settings.DATABASE_URL = TEST_DB_URL


@pytest.fixture(autouse=True, scope="session")
def _configure_test_database():
    init_db(drop_all=True)
    yield
