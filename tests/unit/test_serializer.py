from pdfparser.analysis.models import AnalysisResult, CoverageAmount, InsuranceDetails
from pdfparser.classification.models import ClassificationResult
from pdfparser.pdf.models import DocumentMetadata
from pdfparser.processor.models import (
    ErrorCode,
    Failed,
    ProcessingMethod,
    ProcessingResult,
    ProcessingWarning,
    Processed,
    Protected,
    Severity,
    WarningKind,
)
from pdfparser.processor.serializer import serialize_outcome


def _processed(native_classification: ClassificationResult) -> Processed:
    return Processed(
        ProcessingResult(
            markdown="# Póliza de Seguro\n",
            classification=native_classification,
            success=True,
            metadata=DocumentMetadata(title="Policy", page_count=2),
            analysis=AnalysisResult(
                summary="Insurance policy.",
                main_topics=["seguro"],
                key_points=["Póliza: ABC-123"],
                language="es",
                document_type="insurance",
                structured_data=InsuranceDetails(
                    policy_number="ABC-123",
                    coverages=[CoverageAmount(type="Responsabilidad civil", amount="$1,000")],
                ),
            ),
            warnings=[
                ProcessingWarning(
                    WarningKind.REMOTE_ANALYSIS_FAILED, "timeout", Severity.MEDIUM
                )
            ],
            processing_method=ProcessingMethod.REMOTE_WITH_LOCAL_FALLBACK,
            elapsed_ms=42,
        )
    )


class TestSerializeProcessed:
    def test_uses_camel_case_keys(self, native_classification: ClassificationResult) -> None:
        body = serialize_outcome(_processed(native_classification), filename="policy.pdf")

        assert body["success"] is True
        assert body["filename"] == "policy.pdf"
        assert "sourceUrl" not in body
        assert body["processingMethod"] == "remote-with-local-fallback"
        assert body["processingTime"] == 42
        assert body["error"] is None
        assert body["classification"]["documentKind"] == "native"
        assert body["classification"]["extractionMethod"] == "direct_extraction"
        assert body["classification"]["textQuality"] == "high"
        assert body["metadata"]["pageCount"] == 2
        assert body["metadata"]["creationDate"] is None

    def test_includes_structured_insurance_data(
        self, native_classification: ClassificationResult
    ) -> None:
        body = serialize_outcome(_processed(native_classification))
        structured = body["analysis"]["structuredData"]

        assert body["analysis"]["documentType"] == "insurance"
        assert body["analysis"]["mainTopics"] == ["seguro"]
        assert structured["policyNumber"] == "ABC-123"
        assert structured["claimNumber"] is None
        assert structured["coverages"] == [
            {"type": "Responsabilidad civil", "amount": "$1,000"}
        ]

    def test_serializes_warnings(self, native_classification: ClassificationResult) -> None:
        body = serialize_outcome(_processed(native_classification))
        assert body["warnings"] == [
            {"kind": "REMOTE_ANALYSIS_FAILED", "message": "timeout", "severity": "medium"}
        ]


class TestSerializeProtected:
    def test_marks_metadata_and_analysis(self) -> None:
        outcome = Protected(
            ProcessingResult(
                markdown="",
                classification=ClassificationResult.protected(page_count=1),
                success=False,
                metadata=DocumentMetadata(title="PDF Protegido", page_count=1),
                analysis=AnalysisResult(summary="Protegido", document_type="protected"),
                error=ErrorCode.PDF_PROTECTED,
            )
        )

        body = serialize_outcome(outcome, source_url="https://example.com/a.pdf")

        assert body["success"] is False
        assert body["error"] == "PDF_PROTECTED"
        assert body["metadata"]["isProtected"] is True
        assert body["metadata"]["protectionType"] == "password_protected"
        assert body["analysis"]["error"] == "PDF_PROTECTED"
        assert body["sourceUrl"] == "https://example.com/a.pdf"
        assert body["processingMethod"] is None


class TestSerializeFailed:
    def test_carries_error_message(self) -> None:
        outcome = Failed(
            error_code=ErrorCode.REMOTE_SERVICE_UNAVAILABLE,
            message="RemoteNetworkError: connection refused",
            result=ProcessingResult(
                markdown="",
                classification=None,
                success=False,
                error=ErrorCode.REMOTE_SERVICE_UNAVAILABLE,
            ),
        )

        body = serialize_outcome(outcome)

        assert body["error"] == "REMOTE_SERVICE_UNAVAILABLE"
        assert body["errorMessage"] == "RemoteNetworkError: connection refused"
        assert body["classification"] is None
        assert body["analysis"] is None
