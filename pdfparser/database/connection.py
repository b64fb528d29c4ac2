from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from pdfparser.config.settings import Settings
from pdfparser.logging.logger import Log

APPLICATION_NAME = "pdfparser"

_pool: ConnectionPool | None = None


def conninfo_from_settings(settings: Settings) -> str:
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        application_name=APPLICATION_NAME,
    )


def init_pool(settings: Settings, max_size: int = 4) -> None:
    """Open the configuration-store pool. A second call is a no-op."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        return
    _pool = ConnectionPool(
        conninfo_from_settings(settings), min_size=1, max_size=max_size, open=True
    )
    Log.info(f"Configuration store pool opened ({settings.db_host}:{settings.db_port})")


def close_pool() -> None:
    global _pool  # noqa: PLW0603
    pool, _pool = _pool, None
    if pool is not None:
        pool.close()


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Caller manages commit/rollback.

    Raises:
        RuntimeError: if init_pool() has not been called.
    """
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
