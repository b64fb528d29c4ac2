from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentMetadata:
    """Document information dictionary, with missing entries as None."""

    title: str | None = None
    author: str | None = None
    subject: str | None = None
    keywords: str | None = None
    creation_date: str | None = None
    modification_date: str | None = None
    page_count: int | None = None


@dataclass(frozen=True)
class PdfTextLayer:
    """Text layer of a PDF as produced by a reader engine."""

    text: str
    page_count: int
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


@dataclass(frozen=True)
class PdfStructure:
    """Structural facts about a PDF that do not depend on its text layer."""

    page_count: int
    is_protected: bool
    form_field_count: int
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


@dataclass(frozen=True)
class FormField:
    """A single interactive form field."""

    name: str
    value: str
    field_type: str = ""


@dataclass(frozen=True)
class ParsedPdf:
    """Structure and text layer read during classification, reused by later steps.

    text_layer is None for protected documents, whose text is never read.
    """

    structure: PdfStructure
    text_layer: PdfTextLayer | None = None
