import pytest

from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.inspector import PdfInspector


class TestInspect:
    def test_plain_document(self, multi_page_pdf_bytes: bytes) -> None:
        structure = PdfInspector().inspect(multi_page_pdf_bytes)
        assert structure.page_count == 2
        assert structure.is_protected is False
        assert structure.form_field_count == 0

    def test_encrypted_document_is_protected(self, encrypted_pdf_bytes: bytes) -> None:
        structure = PdfInspector().inspect(encrypted_pdf_bytes)
        assert structure.is_protected is True
        assert structure.form_field_count == 0

    def test_form_document_counts_fields(self, form_pdf_bytes: bytes) -> None:
        structure = PdfInspector().inspect(form_pdf_bytes)
        assert structure.is_protected is False
        assert structure.form_field_count >= 2

    def test_metadata_read_from_info_dictionary(self, sample_pdf_bytes: bytes) -> None:
        metadata = PdfInspector().inspect(sample_pdf_bytes).metadata
        assert metadata.title == "Sample Title"
        assert metadata.page_count == 1

    def test_garbage_raises(self) -> None:
        with pytest.raises(PdfExtractionError, match="PDF inspection failed"):
            PdfInspector().inspect(b"")


class TestReadFormFields:
    def test_returns_field_names_and_values(self, form_pdf_bytes: bytes) -> None:
        fields = {f.name: f.value for f in PdfInspector().read_form_fields(form_pdf_bytes)}
        assert fields["full_name"] == "Jane Doe"
        assert fields["city"] == ""

    def test_plain_document_has_no_fields(self, sample_pdf_bytes: bytes) -> None:
        assert PdfInspector().read_form_fields(sample_pdf_bytes) == []

    def test_garbage_raises(self) -> None:
        with pytest.raises(PdfExtractionError, match="Form field extraction failed"):
            PdfInspector().read_form_fields(b"")
