from abc import ABC, abstractmethod

import psycopg
from psycopg.rows import dict_row

from pdfparser.claims.exceptions import ConfigStoreError
from pdfparser.claims.models import ExtractionConfig
from pdfparser.database.connection import get_connection


class BaseExtractionConfigStore(ABC):
    @abstractmethod
    def list_configs(self) -> list[ExtractionConfig]:
        """Return every configured extraction, keyed implicitly by filename."""
        raise NotImplementedError


class InMemoryExtractionConfigStore(BaseExtractionConfigStore):
    """Store backed by a fixed list, for offline runs and tests."""

    def __init__(self, configs: list[ExtractionConfig] | None = None) -> None:
        self._configs = list(configs or [])

    def list_configs(self) -> list[ExtractionConfig]:
        return list(self._configs)


class PostgresExtractionConfigStore(BaseExtractionConfigStore):
    """Reads extraction configurations from the claim_extract table."""

    def list_configs(self) -> list[ExtractionConfig]:
        """Load all rows ordered by id.

        Raises:
            ConfigStoreError: if the query fails.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        """
                        SELECT filename, fieldname, prompt, example
                        FROM claim_extract
                        ORDER BY id
                        """
                    )
                    rows = cur.fetchall()
        except psycopg.Error as exc:
            raise ConfigStoreError(f"Failed to load extraction configurations: {exc}") from exc

        return [
            ExtractionConfig(
                filename=row["filename"],
                fieldname=row["fieldname"],
                prompt=row["prompt"],
                example=row["example"] or "",
            )
            for row in rows
        ]
