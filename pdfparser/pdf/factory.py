from pdfparser.config.settings import Settings
from pdfparser.logging.logger import Log
from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.pdfplumber_adapter import PdfPlumberAdapter
from pdfparser.pdf.pymupdf_adapter import PyMuPdfAdapter

# "fitz" is the legacy import name of PyMuPDF.
_ENGINE_ALIASES = {"fitz": "pymupdf"}


class PdfReaderFactory:
    """Maps PDF_ENGINE to a text-layer reader shared by classification and extraction."""

    READERS: dict[str, type[BasePdfReader]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfReader:
        requested = settings.pdf_engine.strip().lower()
        engine = _ENGINE_ALIASES.get(requested, requested)
        try:
            reader_cls = cls.READERS[engine]
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{settings.pdf_engine}'. "
                f"Supported engines: {', '.join(sorted(cls.READERS))}"
            ) from None
        Log.debug(f"Using {engine} text-layer reader")
        return reader_cls()
