import pytest

from pdfparser.analysis.analyzer import EMPTY_SUMMARY, LocalContentAnalyzer
from pdfparser.analysis.models import CoverageAmount
from pdfparser.analysis.vocabulary import CANNED_SUMMARIES
from pdfparser.classification.models import ClassificationResult

POLICY_TEXT = "\n".join(
    [
        "Policy Number: ABC-123",
        "Claim Number: CLM-9981",
        "Named Insured: John Doe",
        "Effective Date: 01/15/2024",
        "Expiration Date: 01/15/2025",
        "Premium: $500.00",
        "Collision Coverage: $25,000",
        "Liability Limit - $100,000",
    ]
)


class TestDocumentType:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            (POLICY_TEXT, "insurance"),
            ("Invoice 2024-11\nAmount due: $90", "invoice"),
            ("This Agreement is made between the parties", "contract"),
            ("Pay to the order of John Smith", "check"),
            ("Meeting notes from Tuesday", "general"),
        ],
    )
    def test_detect(self, text: str, expected: str) -> None:
        assert LocalContentAnalyzer.detect_document_type(text) == expected

    def test_insurance_checked_before_invoice(self) -> None:
        text = "Invoice for the annual premium"
        assert LocalContentAnalyzer.detect_document_type(text) == "insurance"


class TestInsuranceDetails:
    def test_extracts_fields(self) -> None:
        details = LocalContentAnalyzer.extract_insurance_details(POLICY_TEXT)
        assert details.policy_number == "ABC-123"
        assert details.claim_number == "CLM-9981"
        assert details.insured_party == "John Doe"
        assert details.effective_date == "01/15/2024"
        assert details.expiration_date == "01/15/2025"
        assert details.premium == "$500.00"
        assert details.coverages == [
            CoverageAmount(type="Collision Coverage", amount="$25,000"),
            CoverageAmount(type="Liability Limit", amount="$100,000"),
        ]

    def test_missing_fields_are_none(self) -> None:
        details = LocalContentAnalyzer.extract_insurance_details("insured party unknown")
        assert details.policy_number is None
        assert details.premium is None
        assert details.coverages == []


class TestLanguage:
    def test_spanish(self) -> None:
        text = "El contrato de la empresa es para los clientes y se firma en la oficina"
        assert LocalContentAnalyzer.detect_language(text) == "es"

    def test_english(self) -> None:
        text = "The policy is valid for the insured and covers damage to the vehicle"
        assert LocalContentAnalyzer.detect_language(text) == "en"

    def test_no_function_words(self) -> None:
        assert LocalContentAnalyzer.detect_language("12345 67890") == "unknown"

    def test_close_counts_are_unknown(self) -> None:
        assert LocalContentAnalyzer.detect_language("the el of de") == "unknown"


class TestAnalyze:
    def test_insurance_document(self, native_classification: ClassificationResult) -> None:
        result = LocalContentAnalyzer().analyze(POLICY_TEXT, native_classification)
        assert result.document_type == "insurance"
        assert result.summary == CANNED_SUMMARIES["insurance"]
        assert result.structured_data is not None
        assert result.structured_data.policy_number == "ABC-123"
        assert result.main_topics[:2] == ["policy", "coverage"]
        assert len(result.main_topics) <= 5

    def test_general_summary_is_truncated(
        self, native_classification: ClassificationResult
    ) -> None:
        text = "\n".join(
            [
                "- a bullet line that is long enough to be a summary line",
                "Alpha " * 15,
                "Bravo " * 15,
                "Charlie " * 15,
                "Delta " * 15,
            ]
        )
        result = LocalContentAnalyzer().analyze(text, native_classification)
        assert result.summary.startswith("Alpha")
        assert result.summary.endswith("...")
        assert len(result.summary) == 203
        assert "Delta" not in result.summary
        assert "bullet" not in result.summary
        assert result.structured_data is None

    def test_key_points_capped_at_five(
        self, native_classification: ClassificationResult
    ) -> None:
        lines = [f"Item {i} costs ${i}00.00" for i in range(1, 8)]
        lines.insert(0, "Just a plain sentence")
        result = LocalContentAnalyzer().analyze("\n".join(lines), native_classification)
        assert result.key_points == lines[1:6]

    def test_key_points_skip_long_lines(
        self, native_classification: ClassificationResult
    ) -> None:
        long_line = "Total " + "x" * 100
        result = LocalContentAnalyzer().analyze(
            f"{long_line}\nReference number 42", native_classification
        )
        assert result.key_points == ["Reference number 42"]

    def test_topics_backfill_by_frequency(
        self, native_classification: ClassificationResult
    ) -> None:
        text = "warehouse warehouse warehouse staffing staffing throughput about"
        result = LocalContentAnalyzer().analyze(text, native_classification)
        assert result.main_topics == ["warehouse", "staffing", "throughput"]

    def test_empty_text(self, native_classification: ClassificationResult) -> None:
        result = LocalContentAnalyzer().analyze("", native_classification)
        assert result.summary == EMPTY_SUMMARY
        assert result.main_topics == []
        assert result.key_points == []
        assert result.language == "unknown"
        assert result.document_type == "general"
