from sqlalchemy.pool import StaticPool

from app.db import _engine_kwargs


def test_in_memory_sqlite_shares_one_connection():
    for url in ("sqlite://", "sqlite:///:memory:", "sqlite+pysqlite:///:memory:"):
        assert _engine_kwargs(url)["poolclass"] is StaticPool, url


def test_sqlite_file_and_postgres_use_default_pool():
    assert "poolclass" not in _engine_kwargs("sqlite:///./weight_tracker.db")
    assert _engine_kwargs("postgresql+psycopg2://u:p@localhost/weights") == {"pool_pre_ping": True}
