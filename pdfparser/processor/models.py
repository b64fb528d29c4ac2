from dataclasses import dataclass, field
from enum import Enum

from pdfparser.analysis.models import AnalysisResult
from pdfparser.classification.models import ClassificationResult
from pdfparser.pdf.models import DocumentMetadata
from pdfparser.processor.exceptions import InvalidOptionsError

MIN_MAX_TOKENS = 100
MAX_MAX_TOKENS = 8000
DEFAULT_MAX_TOKENS = 4000


class ProcessingMethod(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"
    REMOTE_WITH_LOCAL_FALLBACK = "remote-with-local-fallback"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WarningKind(str, Enum):
    PDF_PROTECTED = "PDF_PROTECTED"
    OCR_REQUIRED = "OCR_REQUIRED"
    OCR_UNAVAILABLE = "OCR_UNAVAILABLE"
    REMOTE_RENDERING_FAILED = "REMOTE_RENDERING_FAILED"
    REMOTE_ANALYSIS_FAILED = "REMOTE_ANALYSIS_FAILED"


class ErrorCode(str, Enum):
    PDF_PROTECTED = "PDF_PROTECTED"
    REMOTE_SERVICE_UNAVAILABLE = "REMOTE_SERVICE_UNAVAILABLE"
    PROCESSING_FAILED = "PROCESSING_FAILED"


@dataclass(frozen=True)
class ProcessingWarning:
    kind: WarningKind
    message: str
    severity: Severity


@dataclass(frozen=True)
class ExtractionOptions:
    """Per-request options supplied by the caller."""

    instructions: str | None = None
    include_analysis: bool = True
    extract_metadata: bool = True
    max_tokens: int = DEFAULT_MAX_TOKENS
    use_local_processing: bool = False

    def __post_init__(self) -> None:
        if not MIN_MAX_TOKENS <= self.max_tokens <= MAX_MAX_TOKENS:
            raise InvalidOptionsError(
                f"max_tokens must be between {MIN_MAX_TOKENS} and {MAX_MAX_TOKENS}, "
                f"got {self.max_tokens}"
            )


@dataclass(frozen=True)
class ProcessingResult:
    """Everything produced for one document."""

    markdown: str
    classification: ClassificationResult | None
    success: bool
    metadata: DocumentMetadata | None = None
    analysis: AnalysisResult | None = None
    warnings: list[ProcessingWarning] = field(default_factory=list)
    processing_method: ProcessingMethod | None = None
    elapsed_ms: int = 0
    error: ErrorCode | None = None


@dataclass(frozen=True)
class Processed:
    result: ProcessingResult


@dataclass(frozen=True)
class Protected:
    result: ProcessingResult


@dataclass(frozen=True)
class Failed:
    error_code: ErrorCode
    message: str
    result: ProcessingResult


ProcessingOutcome = Processed | Protected | Failed
