from abc import ABC, abstractmethod
from typing import ClassVar

from pdfparser.classification.models import DocumentKind
from pdfparser.extraction.exceptions import (
    ExtractionError,
    ProtectedDocumentError,
    StrategyConfigurationError,
)
from pdfparser.extraction.models import ExtractedText, StrategyKind
from pdfparser.logging.logger import Log
from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.inspector import PdfInspector
from pdfparser.pdf.models import PdfTextLayer

OCR_NOT_IMPLEMENTED = "OCR not implemented yet"


class BaseExtractionStrategy(ABC):
    """Contract for text extraction strategies."""

    kind: ClassVar[StrategyKind]
    handles: ClassVar[frozenset[DocumentKind]]

    def can_handle(self, document_kind: DocumentKind) -> bool:
        return document_kind in self.handles

    @abstractmethod
    def extract(self, pdf_bytes: bytes, text_layer: PdfTextLayer | None = None) -> ExtractedText:
        """Extract text from PDF bytes.

        A text_layer already read from the same bytes is used instead of
        reading them again.

        Raises:
            ExtractionError: if the strategy cannot produce text.
            PdfExtractionError: if the underlying reader fails.
        """


class NativeExtractionStrategy(BaseExtractionStrategy):
    """Reads the embedded text layer directly."""

    kind = StrategyKind.NATIVE
    handles = frozenset({DocumentKind.NATIVE})

    def __init__(self, reader: BasePdfReader) -> None:
        self._reader = reader

    def extract(self, pdf_bytes: bytes, text_layer: PdfTextLayer | None = None) -> ExtractedText:
        layer = text_layer if text_layer is not None else self._reader.read(pdf_bytes)
        return ExtractedText(text=layer.text, strategy=self.kind)


class OcrExtractionStrategy(BaseExtractionStrategy):
    """Placeholder for image-based documents until an OCR engine is wired in.

    Returns whatever text layer exists (possibly none) and flags the result
    with the OCR_NOT_IMPLEMENTED marker.
    """

    kind = StrategyKind.OCR
    handles = frozenset({DocumentKind.SCANNED, DocumentKind.MIXED})

    def __init__(self, reader: BasePdfReader) -> None:
        self._reader = reader

    def extract(self, pdf_bytes: bytes, text_layer: PdfTextLayer | None = None) -> ExtractedText:
        Log.warning("OCR required for this PDF; no OCR engine is configured")
        if text_layer is not None:
            return ExtractedText(
                text=text_layer.text, strategy=self.kind, notice=OCR_NOT_IMPLEMENTED
            )
        try:
            text = self._reader.read(pdf_bytes).text
        except PdfExtractionError as exc:
            Log.debug(f"No readable text layer for OCR candidate: {exc}")
            text = ""
        return ExtractedText(text=text, strategy=self.kind, notice=OCR_NOT_IMPLEMENTED)


class FormExtractionStrategy(BaseExtractionStrategy):
    """Reads the text layer and appends interactive field values."""

    kind = StrategyKind.FORM
    handles = frozenset({DocumentKind.FORM_BASED})

    def __init__(self, reader: BasePdfReader, inspector: PdfInspector) -> None:
        self._reader = reader
        self._inspector = inspector

    def extract(self, pdf_bytes: bytes, text_layer: PdfTextLayer | None = None) -> ExtractedText:
        layer = text_layer if text_layer is not None else self._reader.read(pdf_bytes)
        text = layer.text
        fields = [f for f in self._inspector.read_form_fields(pdf_bytes) if f.name]
        if not fields:
            return ExtractedText(text=text, strategy=self.kind)
        field_lines = [f"{f.name}: {f.value}" if f.value else f"{f.name}: ________" for f in fields]
        block = "\n".join(["FORM FIELDS", *field_lines])
        combined = f"{text}\n\n{block}" if text else block
        return ExtractedText(text=combined, strategy=self.kind)


class DecryptFirstStrategy(BaseExtractionStrategy):
    """Registered for protected documents, which are short-circuited upstream."""

    kind = StrategyKind.DECRYPT_FIRST
    handles = frozenset({DocumentKind.PROTECTED})

    def extract(self, pdf_bytes: bytes, text_layer: PdfTextLayer | None = None) -> ExtractedText:
        _ = pdf_bytes, text_layer
        raise ProtectedDocumentError("Document is password protected; decryption is not supported")


class StrategySelector:
    """Picks the first registered strategy able to handle a document kind."""

    def __init__(self, strategies: list[BaseExtractionStrategy]) -> None:
        self._strategies = list(strategies)
        missing = [
            kind.value
            for kind in DocumentKind
            if not any(s.can_handle(kind) for s in self._strategies)
        ]
        if missing:
            raise StrategyConfigurationError(
                f"No extraction strategy registered for document kinds: {missing}"
            )

    def select(self, document_kind: DocumentKind) -> BaseExtractionStrategy:
        for strategy in self._strategies:
            if strategy.can_handle(document_kind):
                return strategy
        raise ExtractionError(f"No extraction strategy for {document_kind.value}")


def build_strategy_selector(reader: BasePdfReader, inspector: PdfInspector) -> StrategySelector:
    """Register the fixed strategy set in priority order."""
    return StrategySelector(
        [
            NativeExtractionStrategy(reader),
            OcrExtractionStrategy(reader),
            FormExtractionStrategy(reader, inspector),
            DecryptFirstStrategy(),
        ]
    )
