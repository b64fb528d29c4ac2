import pymupdf

from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.models import DocumentMetadata, PdfTextLayer


def metadata_from_pymupdf(raw: dict[str, str] | None, page_count: int) -> DocumentMetadata:
    """Map PyMuPDF's lower-camel metadata keys onto DocumentMetadata."""
    raw = raw or {}

    def value(key: str) -> str | None:
        text = (raw.get(key) or "").strip()
        return text or None

    return DocumentMetadata(
        title=value("title"),
        author=value("author"),
        subject=value("subject"),
        keywords=value("keywords"),
        creation_date=value("creationDate"),
        modification_date=value("modDate"),
        page_count=page_count,
    )


class PyMuPdfAdapter(BasePdfReader):
    """Reads the PDF text layer using PyMuPDF."""

    def read(self, pdf_bytes: bytes) -> PdfTextLayer:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.needs_pass:
                    raise PdfExtractionError("pymupdf extraction failed: document is encrypted")
                pages = [page.get_text() for page in doc]
                metadata = metadata_from_pymupdf(doc.metadata, doc.page_count)
                page_count = doc.page_count
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc
        return PdfTextLayer(
            text="\n".join(pages).strip(),
            page_count=page_count,
            metadata=metadata,
        )
