from abc import ABC, abstractmethod

from pdfparser.pdf.models import PdfTextLayer


class BasePdfReader(ABC):
    """Contract for all PDF text-layer reading adapters."""

    @abstractmethod
    def read(self, pdf_bytes: bytes) -> PdfTextLayer:
        """Read the text layer, page count and info dictionary of a PDF.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfTextLayer with the stripped text of all pages joined by newlines.

        Raises:
            PdfExtractionError: if the document cannot be opened or read.
        """
