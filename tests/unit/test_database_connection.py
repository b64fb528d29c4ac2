from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from pdfparser.config.settings import Settings
from pdfparser.database import connection
from pdfparser.database.connection import (
    close_pool,
    conninfo_from_settings,
    get_connection,
    init_pool,
)


@pytest.fixture(autouse=True)
def _reset_pool() -> Generator[None, None, None]:
    close_pool()
    yield
    connection._pool = None


class TestConninfo:
    def test_includes_database_settings(self) -> None:
        conninfo = conninfo_from_settings(
            Settings(db_host="db.internal", db_port=6543, db_database="claims")
        )

        assert "host=db.internal" in conninfo
        assert "port=6543" in conninfo
        assert "dbname=claims" in conninfo
        assert "application_name=pdfparser" in conninfo


class TestPoolLifecycle:
    def test_get_connection_requires_pool(self) -> None:
        with pytest.raises(RuntimeError, match="init_pool"):
            with get_connection():
                pass

    @patch("pdfparser.database.connection.ConnectionPool")
    def test_init_pool_is_idempotent(self, mock_pool_cls: MagicMock) -> None:
        init_pool(Settings())
        init_pool(Settings())

        mock_pool_cls.assert_called_once()
        assert mock_pool_cls.call_args.kwargs["max_size"] == 4

    @patch("pdfparser.database.connection.ConnectionPool")
    def test_close_pool_closes_and_forgets(self, mock_pool_cls: MagicMock) -> None:
        init_pool(Settings())
        close_pool()

        mock_pool_cls.return_value.close.assert_called_once()
        with pytest.raises(RuntimeError):
            with get_connection():
                pass
