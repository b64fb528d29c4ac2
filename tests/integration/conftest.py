import io
import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdfparser.config.settings import Settings
from pdfparser.database.connection import close_pool, get_connection, init_pool

INSURANCE_LINES = [
    "INSURANCE POLICY DECLARATIONS",
    "Policy Number: ABC-12345",
    "Named Insured: Maria Lopez",
    "Effective Date: 01/01/2024",
    "Expiration Date: 12/31/2024",
    "Total Premium: $1,200.00",
    "Liability coverage: $100,000",
    "Deductible: $500",
    "Phone: (555) 123-4567",
]


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "pdfparser_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a scratch database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def claim_extract_rows(
    db_conn: psycopg.Connection[Any],
) -> Generator[list[int], None, None]:
    """Create claim_extract if needed and seed two rows, removed afterwards."""
    with db_conn.cursor() as cur:
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS claim_extract (
                id SERIAL PRIMARY KEY,
                filename TEXT NOT NULL,
                fieldname TEXT NOT NULL,
                prompt TEXT NOT NULL,
                example TEXT
            )
            """
        )
        ids: list[int] = []
        for row in (
            ("it-policy.pdf", "policyNumber", "Extract the policy number.", "POL-0001"),
            ("it-claim.pdf", "claimDate", "Extract the claim date.", None),
        ):
            cur.execute(
                """
                INSERT INTO claim_extract (filename, fieldname, prompt, example)
                VALUES (%s, %s, %s, %s)
                RETURNING id
                """,
                row,
            )
            inserted = cur.fetchone()
            assert inserted is not None
            ids.append(inserted[0])
    db_conn.commit()
    try:
        yield ids
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM claim_extract WHERE id = ANY(%s)", (ids,))
        db_conn.commit()


@pytest.fixture
def insurance_pdf_bytes() -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Declarations")
    y = 740
    for line in INSURANCE_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()
