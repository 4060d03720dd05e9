import os

# Use in-memory sqlite for tests; must be set before the app modules are imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"

import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_db():
    from app.main import app  # noqa: F401  (registers every table)
    from app.db import Base, engine

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
