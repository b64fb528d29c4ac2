import pytest

from pdfparser.claims.models import ExtractionConfig
from pdfparser.claims.store import PostgresExtractionConfigStore


@pytest.mark.integration
class TestPostgresExtractionConfigStore:
    def test_lists_seeded_rows_in_id_order(self, claim_extract_rows: list[int]) -> None:
        configs = PostgresExtractionConfigStore().list_configs()

        seeded = [c for c in configs if c.filename.startswith("it-")]
        assert seeded == [
            ExtractionConfig(
                filename="it-policy.pdf",
                fieldname="policyNumber",
                prompt="Extract the policy number.",
                example="POL-0001",
            ),
            ExtractionConfig(
                filename="it-claim.pdf",
                fieldname="claimDate",
                prompt="Extract the claim date.",
                example="",
            ),
        ]
