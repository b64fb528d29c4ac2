"""Structural inspection of PDFs: protection, form fields and metadata."""

import pymupdf

from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.models import FormField, PdfStructure
from pdfparser.pdf.pymupdf_adapter import metadata_from_pymupdf


class PdfInspector:
    """Reads structural properties of a PDF with PyMuPDF.

    Text is never extracted here; that is the job of the configured reader.
    """

    def inspect(self, pdf_bytes: bytes) -> PdfStructure:
        """Report page count, protection status and form field count.

        A document counts as protected when it needs a password, is still
        encrypted after opening, or its security metadata names an
        encryption scheme.

        Raises:
            PdfExtractionError: if the bytes cannot be opened as a PDF.
        """
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                metadata = doc.metadata or {}
                is_protected = bool(
                    doc.needs_pass or doc.is_encrypted or metadata.get("encryption")
                )
                form_field_count = 0 if is_protected else int(doc.is_form_pdf or 0)
                return PdfStructure(
                    page_count=doc.page_count,
                    is_protected=is_protected,
                    form_field_count=form_field_count,
                    metadata=metadata_from_pymupdf(metadata, doc.page_count),
                )
        except Exception as exc:
            raise PdfExtractionError(f"PDF inspection failed: {exc}") from exc

    def read_form_fields(self, pdf_bytes: bytes) -> list[FormField]:
        """Return every widget on every page as a FormField, in page order.

        Raises:
            PdfExtractionError: if the bytes cannot be opened as a PDF.
        """
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                fields: list[FormField] = []
                for page in doc:
                    for widget in page.widgets():
                        fields.append(
                            FormField(
                                name=(widget.field_name or "").strip(),
                                value=str(widget.field_value or "").strip(),
                                field_type=widget.field_type_string or "",
                            )
                        )
                return fields
        except Exception as exc:
            raise PdfExtractionError(f"Form field extraction failed: {exc}") from exc
