import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from pdfparser.classification.models import ClassificationResult, DocumentKind

LONG_LINE = "Quarterly operations report describing warehouse throughput and staffing."


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.setTitle("Sample Title")
    c.setAuthor("Sample Author")
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def native_pdf_bytes() -> bytes:
    """Single page with well over 500 characters of text."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 740
    for i in range(15):
        c.drawString(50, y, f"{i:02d} {LONG_LINE}")
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def form_pdf_bytes() -> bytes:
    """Single page with two AcroForm text fields."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 740, "APPLICATION FORM")
    c.drawString(72, 700, "Full name:")
    c.acroForm.textfield(
        name="full_name", value="Jane Doe", x=160, y=690, width=200, height=20
    )
    c.drawString(72, 660, "City:")
    c.acroForm.textfield(name="city", value="", x=160, y=650, width=200, height=20)
    c.save()
    return buf.getvalue()


@pytest.fixture()
def encrypted_pdf_bytes() -> bytes:
    """Single page PDF that needs the user password 'secret'."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, encrypt="secret")
    c.drawString(72, 720, "Confidential content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def native_classification() -> ClassificationResult:
    return ClassificationResult(
        document_kind=DocumentKind.NATIVE,
        has_extractable_text=True,
        text_character_count=1200,
        page_count=2,
        requires_ocr=False,
        has_form_fields=False,
        is_protected=False,
    )


@pytest.fixture()
def form_classification() -> ClassificationResult:
    return ClassificationResult(
        document_kind=DocumentKind.FORM_BASED,
        has_extractable_text=True,
        text_character_count=300,
        page_count=1,
        requires_ocr=False,
        has_form_fields=True,
        is_protected=False,
    )
