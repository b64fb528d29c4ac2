import io

import pdfplumber

from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.models import DocumentMetadata, PdfTextLayer


def _info_value(info: dict[str, object], key: str) -> str | None:
    value = info.get(key)
    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip()
    return text or None


class PdfPlumberAdapter(BasePdfReader):
    """Reads the PDF text layer using pdfplumber."""

    def read(self, pdf_bytes: bytes) -> PdfTextLayer:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
                info = dict(pdf.metadata or {})
                page_count = len(pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

        metadata = DocumentMetadata(
            title=_info_value(info, "Title"),
            author=_info_value(info, "Author"),
            subject=_info_value(info, "Subject"),
            keywords=_info_value(info, "Keywords"),
            creation_date=_info_value(info, "CreationDate"),
            modification_date=_info_value(info, "ModDate"),
            page_count=page_count,
        )
        return PdfTextLayer(
            text="\n".join(pages).strip(),
            page_count=page_count,
            metadata=metadata,
        )
