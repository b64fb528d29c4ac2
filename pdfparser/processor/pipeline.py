import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from pdfparser.analysis.models import AnalysisResult
from pdfparser.classification.models import ClassificationResult
from pdfparser.extraction.models import ExtractedText
from pdfparser.pdf.models import DocumentMetadata, ParsedPdf
from pdfparser.processor.models import (
    ErrorCode,
    ExtractionOptions,
    ProcessingMethod,
    ProcessingOutcome,
    ProcessingResult,
    ProcessingWarning,
    Severity,
    WarningKind,
)
from pdfparser.processor.routing import RoutingDecision


class PipelineState(str, Enum):
    CLASSIFYING = "classifying"
    VALIDATING = "validating"
    EXTRACTING = "extracting"
    SELECTING_PATH = "selecting_path"
    RENDERING = "rendering"
    ANALYZING = "analyzing"
    ASSEMBLING = "assembling"
    DONE = "done"


@dataclass(slots=True)
class ProcessingContext:
    raw_bytes: bytes
    options: ExtractionOptions
    started_at: float = field(default_factory=time.monotonic)
    state: PipelineState = PipelineState.CLASSIFYING
    classification: ClassificationResult | None = None
    parsed: ParsedPdf | None = None
    extracted: ExtractedText | None = None
    metadata: DocumentMetadata | None = None
    routing: RoutingDecision | None = None
    markdown: str = ""
    analysis: AnalysisResult | None = None
    warnings: list[ProcessingWarning] = field(default_factory=list)
    fell_back: bool = False
    outcome: ProcessingOutcome | None = None

    @property
    def text(self) -> str:
        return self.extracted.text if self.extracted is not None else ""

    @property
    def processing_method(self) -> ProcessingMethod | None:
        if self.routing is None:
            return None
        if not self.routing.use_remote:
            return ProcessingMethod.LOCAL
        if self.fell_back:
            return ProcessingMethod.REMOTE_WITH_LOCAL_FALLBACK
        return ProcessingMethod.REMOTE

    def warn(self, kind: WarningKind, message: str, severity: Severity) -> None:
        self.warnings.append(ProcessingWarning(kind=kind, message=message, severity=severity))

    def elapsed_ms(self) -> int:
        return int((time.monotonic() - self.started_at) * 1000)

    def snapshot(self, *, success: bool, error: ErrorCode | None = None) -> ProcessingResult:
        """Build a result from whatever has been computed so far."""
        return ProcessingResult(
            markdown=self.markdown,
            classification=self.classification,
            success=success,
            metadata=self.metadata,
            analysis=self.analysis,
            warnings=list(self.warnings),
            processing_method=self.processing_method,
            elapsed_ms=self.elapsed_ms(),
            error=error,
        )


class PipelineStep(ABC):
    state: ClassVar[PipelineState]

    @abstractmethod
    async def run(self, context: ProcessingContext) -> ProcessingContext:
        raise NotImplementedError
