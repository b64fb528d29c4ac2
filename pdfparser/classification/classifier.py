from pdfparser.classification.models import (
    MIXED_DOCUMENT_CHARS_PER_PAGE,
    ClassificationResult,
    DocumentKind,
)
from pdfparser.logging.logger import Log
from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.inspector import PdfInspector
from pdfparser.pdf.models import ParsedPdf


class PdfClassifier:
    """Assigns exactly one DocumentKind to any byte buffer.

    Rules, first match wins: protected, form fields present, no text at all
    (scanned), sparse text per page (mixed), otherwise native.
    """

    def __init__(self, reader: BasePdfReader, inspector: PdfInspector | None = None) -> None:
        self._reader = reader
        self._inspector = inspector if inspector is not None else PdfInspector()

    def classify(self, pdf_bytes: bytes) -> ClassificationResult:
        """Classify a PDF. Never raises; unreadable input is treated as a scan."""
        return self.classify_parsed(pdf_bytes)[0]

    def classify_parsed(
        self, pdf_bytes: bytes
    ) -> tuple[ClassificationResult, ParsedPdf | None]:
        """Classify a PDF and hand back what was read to do it.

        The ParsedPdf is None when the input could not be parsed.
        """
        try:
            result, parsed = self._classify(pdf_bytes)
        except Exception as exc:
            Log.warning(f"Could not classify PDF, assuming scanned document: {exc}")
            return ClassificationResult.unreadable(), None
        Log.info(
            f"PDF classified: kind={result.document_kind.value} "
            f"pages={result.page_count} chars={result.text_character_count} "
            f"quality={result.text_quality.value} method={result.extraction_method.value}"
        )
        return result, parsed

    def _classify(self, pdf_bytes: bytes) -> tuple[ClassificationResult, ParsedPdf]:
        structure = self._inspector.inspect(pdf_bytes)
        if structure.is_protected:
            return ClassificationResult.protected(structure.page_count), ParsedPdf(structure)

        layer = self._reader.read(pdf_bytes)
        page_count = layer.page_count or structure.page_count
        char_count = len(layer.text.strip())
        has_text = char_count > 0
        has_form_fields = structure.form_field_count > 0

        requires_ocr = False
        if has_form_fields:
            kind = DocumentKind.FORM_BASED
        elif not has_text:
            kind = DocumentKind.SCANNED
            requires_ocr = True
        elif page_count == 0 or char_count / page_count < MIXED_DOCUMENT_CHARS_PER_PAGE:
            kind = DocumentKind.MIXED
            requires_ocr = True
        else:
            kind = DocumentKind.NATIVE

        result = ClassificationResult(
            document_kind=kind,
            has_extractable_text=has_text,
            text_character_count=char_count,
            page_count=page_count,
            requires_ocr=requires_ocr,
            has_form_fields=has_form_fields,
            is_protected=False,
        )
        return result, ParsedPdf(structure, layer)
