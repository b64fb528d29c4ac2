from unittest.mock import MagicMock

import pytest

from pdfparser.classification.classifier import PdfClassifier
from pdfparser.classification.models import (
    ClassificationResult,
    DocumentKind,
    ExtractionMethod,
    TextQuality,
    text_quality_for,
)
from pdfparser.pdf.models import PdfStructure, PdfTextLayer
from pdfparser.pdf.pdfplumber_adapter import PdfPlumberAdapter


def _classifier_with(
    text: str, page_count: int, *, protected: bool = False, form_fields: int = 0
) -> PdfClassifier:
    reader = MagicMock()
    reader.read.return_value = PdfTextLayer(text=text, page_count=page_count)
    inspector = MagicMock()
    inspector.inspect.return_value = PdfStructure(
        page_count=page_count, is_protected=protected, form_field_count=form_fields
    )
    return PdfClassifier(reader, inspector)


class TestTextQuality:
    @pytest.mark.parametrize(
        ("chars", "pages", "expected"),
        [
            (1001, 2, TextQuality.HIGH),
            (1000, 2, TextQuality.MEDIUM),
            (201, 2, TextQuality.MEDIUM),
            (200, 2, TextQuality.LOW),
            (1, 1, TextQuality.LOW),
            (0, 3, TextQuality.NONE),
            (50, 0, TextQuality.NONE),
        ],
    )
    def test_thresholds(self, chars: int, pages: int, expected: TextQuality) -> None:
        assert text_quality_for(chars, pages) is expected


class TestClassificationResult:
    def test_protected_requires_protected_kind(self) -> None:
        with pytest.raises(ValueError, match="PROTECTED"):
            ClassificationResult(
                document_kind=DocumentKind.NATIVE,
                has_extractable_text=True,
                text_character_count=10,
                page_count=1,
                requires_ocr=False,
                has_form_fields=False,
                is_protected=True,
            )

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            ClassificationResult(
                document_kind=DocumentKind.SCANNED,
                has_extractable_text=False,
                text_character_count=-1,
                page_count=1,
                requires_ocr=True,
                has_form_fields=False,
                is_protected=False,
            )

    def test_extraction_method_is_derived(self) -> None:
        assert ClassificationResult.unreadable().extraction_method is ExtractionMethod.OCR_REQUIRED
        assert ClassificationResult.protected().extraction_method is ExtractionMethod.DECRYPT_FIRST


class TestClassificationRules:
    def test_protected_wins_over_everything(self) -> None:
        classifier = _classifier_with("x" * 5000, 1, protected=True, form_fields=3)
        result = classifier.classify(b"pdf")
        assert result.document_kind is DocumentKind.PROTECTED
        assert result.is_protected is True

    def test_protected_skips_text_reading(self) -> None:
        classifier = _classifier_with("", 1, protected=True)
        classifier.classify(b"pdf")
        classifier._reader.read.assert_not_called()  # type: ignore[attr-defined]

    def test_form_fields_make_form_based(self) -> None:
        result = _classifier_with("x" * 5000, 1, form_fields=2).classify(b"pdf")
        assert result.document_kind is DocumentKind.FORM_BASED
        assert result.has_form_fields is True
        assert result.requires_ocr is False

    def test_no_text_is_scanned(self) -> None:
        result = _classifier_with("   \n", 3).classify(b"pdf")
        assert result.document_kind is DocumentKind.SCANNED
        assert result.requires_ocr is True
        assert result.text_character_count == 0
        assert result.text_quality is TextQuality.NONE

    def test_sparse_text_is_mixed(self) -> None:
        result = _classifier_with("x" * 199, 2).classify(b"pdf")
        assert result.document_kind is DocumentKind.MIXED
        assert result.requires_ocr is True

    def test_exactly_one_hundred_per_page_is_native(self) -> None:
        result = _classifier_with("x" * 200, 2).classify(b"pdf")
        assert result.document_kind is DocumentKind.NATIVE
        assert result.text_quality is TextQuality.LOW

    def test_dense_text_is_native_high_quality(self) -> None:
        result = _classifier_with("x" * 1200, 2).classify(b"pdf")
        assert result.document_kind is DocumentKind.NATIVE
        assert result.has_extractable_text is True
        assert result.text_quality is TextQuality.HIGH


class TestNeverRaises:
    @pytest.mark.parametrize("data", [b"", b"garbage bytes", b"%PDF-1.4\n%%EOF"])
    def test_unparseable_input_is_scanned(self, data: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(data)
        assert result.document_kind is DocumentKind.SCANNED
        assert result.requires_ocr is True
        assert result.text_character_count == 0

    def test_reader_failure_is_scanned(self) -> None:
        reader = MagicMock()
        reader.read.side_effect = RuntimeError("boom")
        inspector = MagicMock()
        inspector.inspect.return_value = PdfStructure(
            page_count=1, is_protected=False, form_field_count=0
        )
        result = PdfClassifier(reader, inspector).classify(b"pdf")
        assert result == ClassificationResult.unreadable()


class TestClassifyParsed:
    def test_returns_what_was_read(self) -> None:
        classifier = _classifier_with("x" * 1200, 2)

        result, parsed = classifier.classify_parsed(b"pdf")

        assert result.document_kind is DocumentKind.NATIVE
        assert parsed is not None
        assert parsed.structure.page_count == 2
        assert parsed.text_layer is not None
        assert parsed.text_layer.text == "x" * 1200

    def test_protected_document_has_no_text_layer(self) -> None:
        classifier = _classifier_with("secret", 1, protected=True)

        result, parsed = classifier.classify_parsed(b"pdf")

        assert result.is_protected is True
        assert parsed is not None
        assert parsed.text_layer is None

    def test_unparseable_input_has_nothing_parsed(self) -> None:
        result, parsed = PdfClassifier(PdfPlumberAdapter()).classify_parsed(b"garbage")

        assert result == ClassificationResult.unreadable()
        assert parsed is None


class TestRealDocuments:
    def test_native(self, native_pdf_bytes: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(native_pdf_bytes)
        assert result.document_kind is DocumentKind.NATIVE
        assert result.text_quality is TextQuality.HIGH

    def test_short_text_is_mixed(self, sample_pdf_bytes: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(sample_pdf_bytes)
        assert result.document_kind is DocumentKind.MIXED

    def test_blank_is_scanned(self, empty_pdf_bytes: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(empty_pdf_bytes)
        assert result.document_kind is DocumentKind.SCANNED
        assert result.page_count == 1

    def test_form(self, form_pdf_bytes: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(form_pdf_bytes)
        assert result.document_kind is DocumentKind.FORM_BASED

    def test_encrypted(self, encrypted_pdf_bytes: bytes) -> None:
        result = PdfClassifier(PdfPlumberAdapter()).classify(encrypted_pdf_bytes)
        assert result.document_kind is DocumentKind.PROTECTED
        assert result.is_protected is True
