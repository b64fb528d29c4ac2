from dataclasses import dataclass
from enum import Enum

HIGH_QUALITY_CHARS_PER_PAGE = 500
MEDIUM_QUALITY_CHARS_PER_PAGE = 100
MIXED_DOCUMENT_CHARS_PER_PAGE = 100


class DocumentKind(str, Enum):
    NATIVE = "native"
    SCANNED = "scanned"
    MIXED = "mixed"
    FORM_BASED = "form_based"
    PROTECTED = "protected"


class TextQuality(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class ExtractionMethod(str, Enum):
    """Tag describing how text is obtained for a given document kind."""

    DIRECT_EXTRACTION = "direct_extraction"
    OCR_REQUIRED = "ocr_required"
    ENHANCED_OCR = "enhanced_ocr"
    FORM_EXTRACTION = "form_extraction"
    DECRYPT_FIRST = "decrypt_first"


_METHOD_BY_KIND: dict[DocumentKind, ExtractionMethod] = {
    DocumentKind.NATIVE: ExtractionMethod.DIRECT_EXTRACTION,
    DocumentKind.SCANNED: ExtractionMethod.OCR_REQUIRED,
    DocumentKind.MIXED: ExtractionMethod.ENHANCED_OCR,
    DocumentKind.FORM_BASED: ExtractionMethod.FORM_EXTRACTION,
    DocumentKind.PROTECTED: ExtractionMethod.DECRYPT_FIRST,
}


def text_quality_for(text_character_count: int, page_count: int) -> TextQuality:
    """Grade text density per page.

    Zero characters, or a page count that leaves the ratio undefined, is NONE.
    """
    if text_character_count <= 0 or page_count <= 0:
        return TextQuality.NONE
    ratio = text_character_count / page_count
    if ratio > HIGH_QUALITY_CHARS_PER_PAGE:
        return TextQuality.HIGH
    if ratio > MEDIUM_QUALITY_CHARS_PER_PAGE:
        return TextQuality.MEDIUM
    return TextQuality.LOW


@dataclass(frozen=True)
class ClassificationResult:
    """Structural classification of one PDF.

    extraction_method and text_quality are derived from the other fields and
    cannot be passed in.
    """

    document_kind: DocumentKind
    has_extractable_text: bool
    text_character_count: int
    page_count: int
    requires_ocr: bool
    has_form_fields: bool
    is_protected: bool

    def __post_init__(self) -> None:
        if self.text_character_count < 0 or self.page_count < 0:
            raise ValueError("character and page counts must be non-negative")
        if self.is_protected and self.document_kind is not DocumentKind.PROTECTED:
            raise ValueError("protected documents must be classified as PROTECTED")

    @property
    def extraction_method(self) -> ExtractionMethod:
        return _METHOD_BY_KIND[self.document_kind]

    @property
    def text_quality(self) -> TextQuality:
        return text_quality_for(self.text_character_count, self.page_count)

    @classmethod
    def unreadable(cls) -> "ClassificationResult":
        """Safe default for input that could not be parsed at all."""
        return cls(
            document_kind=DocumentKind.SCANNED,
            has_extractable_text=False,
            text_character_count=0,
            page_count=0,
            requires_ocr=True,
            has_form_fields=False,
            is_protected=False,
        )

    @classmethod
    def protected(cls, page_count: int = 0) -> "ClassificationResult":
        return cls(
            document_kind=DocumentKind.PROTECTED,
            has_extractable_text=False,
            text_character_count=0,
            page_count=page_count,
            requires_ocr=False,
            has_form_fields=False,
            is_protected=True,
        )
