import asyncio

from pdfparser.analysis.analyzer import LocalContentAnalyzer
from pdfparser.analysis.models import AnalysisResult
from pdfparser.classification.classifier import PdfClassifier
from pdfparser.classification.models import ClassificationResult, DocumentKind
from pdfparser.config.settings import ProcessingPolicy
from pdfparser.enrichment.enricher import RemoteEnricher
from pdfparser.enrichment.exceptions import RemoteServiceError
from pdfparser.extraction.strategies import StrategySelector
from pdfparser.logging.logger import Log
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.inspector import PdfInspector
from pdfparser.pdf.models import DocumentMetadata
from pdfparser.processor.models import (
    ErrorCode,
    ProcessingResult,
    ProcessingWarning,
    Processed,
    Protected,
    Severity,
    WarningKind,
)
from pdfparser.processor.pipeline import PipelineState, PipelineStep, ProcessingContext
from pdfparser.processor.routing import ProcessingRouter
from pdfparser.rendering.renderer import LocalMarkdownRenderer

PROTECTED_TITLE = "PDF Protegido"
PROTECTED_SUMMARY = "Este PDF está protegido con contraseña y no puede ser procesado"
PROTECTED_KEY_POINTS = ["PDF protegido", "Requiere contraseña"]
PROTECTED_WARNING = "El PDF está protegido y no puede ser procesado sin la contraseña"


def _require_classification(context: ProcessingContext) -> ClassificationResult:
    if context.classification is None:
        raise ValueError("ProcessingContext.classification must be set before this step")
    return context.classification


class ClassifyStep(PipelineStep):
    state = PipelineState.CLASSIFYING

    def __init__(self, classifier: PdfClassifier) -> None:
        self._classifier = classifier

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        classification, parsed = await asyncio.to_thread(
            self._classifier.classify_parsed, context.raw_bytes
        )
        context.classification = classification
        context.parsed = parsed
        if classification.is_protected:
            Log.warning("Protected PDF detected, returning protected result")
            context.outcome = Protected(self._protected_result(context))
        return context

    @staticmethod
    def _protected_result(context: ProcessingContext) -> ProcessingResult:
        return ProcessingResult(
            markdown="",
            classification=context.classification,
            success=False,
            metadata=DocumentMetadata(title=PROTECTED_TITLE, page_count=0),
            analysis=AnalysisResult(
                summary=PROTECTED_SUMMARY,
                main_topics=[],
                key_points=list(PROTECTED_KEY_POINTS),
                language="unknown",
            ),
            warnings=[
                *context.warnings,
                ProcessingWarning(
                    kind=WarningKind.PDF_PROTECTED,
                    message=PROTECTED_WARNING,
                    severity=Severity.HIGH,
                ),
            ],
            elapsed_ms=context.elapsed_ms(),
            error=ErrorCode.PDF_PROTECTED,
        )


class ValidateStep(PipelineStep):
    state = PipelineState.VALIDATING

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        classification = _require_classification(context)
        if (
            classification.document_kind is DocumentKind.SCANNED
            and classification.text_character_count == 0
        ):
            Log.warning("Scanned PDF without text detected; OCR is required")
        if classification.requires_ocr:
            context.warn(
                WarningKind.OCR_REQUIRED,
                f"Este PDF es de tipo {classification.document_kind.value} y puede requerir "
                f"OCR para una mejor extracción (calidad del texto: "
                f"{classification.text_quality.value})",
                Severity.MEDIUM,
            )
        return context


class ExtractStep(PipelineStep):
    state = PipelineState.EXTRACTING

    def __init__(self, selector: StrategySelector, inspector: PdfInspector) -> None:
        self._selector = selector
        self._inspector = inspector

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        classification = _require_classification(context)
        strategy = self._selector.select(classification.document_kind)
        Log.info(
            f"Extracting {classification.document_kind.value} document "
            f"with {strategy.kind.value} strategy"
        )
        text_layer = context.parsed.text_layer if context.parsed is not None else None
        context.extracted = await asyncio.to_thread(
            strategy.extract, context.raw_bytes, text_layer
        )
        if context.extracted.notice:
            context.warn(WarningKind.OCR_UNAVAILABLE, context.extracted.notice, Severity.LOW)
        if context.options.extract_metadata:
            context.metadata = await self._read_metadata(context)
        Log.info(f"Extracted {len(context.text)} chars")
        return context

    async def _read_metadata(self, context: ProcessingContext) -> DocumentMetadata:
        if context.parsed is not None:
            return context.parsed.structure.metadata
        try:
            structure = await asyncio.to_thread(self._inspector.inspect, context.raw_bytes)
            return structure.metadata
        except PdfExtractionError as exc:
            Log.debug(f"No metadata available: {exc}")
            page_count = context.classification.page_count if context.classification else 0
            return DocumentMetadata(page_count=page_count)


class SelectPathStep(PipelineStep):
    state = PipelineState.SELECTING_PATH

    def __init__(self, router: ProcessingRouter) -> None:
        self._router = router

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        classification = _require_classification(context)
        context.routing = self._router.decide(classification, context.text, context.options)
        path = "remote" if context.routing.use_remote else "local"
        Log.info(f"Using {path} processing: {context.routing.reason}")
        return context


class RenderStep(PipelineStep):
    state = PipelineState.RENDERING

    def __init__(
        self,
        renderer: LocalMarkdownRenderer,
        enricher: RemoteEnricher | None,
        policy: ProcessingPolicy,
    ) -> None:
        self._renderer = renderer
        self._enricher = enricher
        self._policy = policy

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        classification = _require_classification(context)
        if self._enricher is None or context.routing is None or not context.routing.use_remote:
            context.markdown = self._renderer.render(context.text, classification)
            return context
        try:
            context.markdown = await self._enricher.convert_to_markdown(
                context.text, context.options, classification
            )
        except RemoteServiceError as exc:
            if not self._policy.fallback_to_local:
                raise
            Log.warning(f"Remote markdown conversion failed, rendering locally: {exc}")
            context.warn(
                WarningKind.REMOTE_RENDERING_FAILED,
                f"{type(exc).__name__}: {exc}",
                Severity.MEDIUM,
            )
            context.fell_back = True
            context.markdown = self._renderer.render(context.text, classification)
        return context


class AnalyzeStep(PipelineStep):
    state = PipelineState.ANALYZING

    def __init__(
        self,
        analyzer: LocalContentAnalyzer,
        enricher: RemoteEnricher | None,
        policy: ProcessingPolicy,
    ) -> None:
        self._analyzer = analyzer
        self._enricher = enricher
        self._policy = policy

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        if not context.options.include_analysis:
            return context
        classification = _require_classification(context)
        if self._enricher is None or context.routing is None or not context.routing.use_remote:
            context.analysis = self._analyzer.analyze(context.text, classification)
            return context
        try:
            context.analysis = await self._enricher.analyze(context.text)
        except RemoteServiceError as exc:
            context.warn(
                WarningKind.REMOTE_ANALYSIS_FAILED,
                f"{type(exc).__name__}: {exc}",
                Severity.LOW,
            )
            if not self._policy.fallback_to_local:
                Log.warning(f"Remote analysis failed, omitting analysis: {exc}")
                context.analysis = None
                return context
            Log.warning(f"Remote analysis failed, analyzing locally: {exc}")
            context.fell_back = True
            context.analysis = self._analyzer.analyze(context.text, classification)
        return context


class AssembleStep(PipelineStep):
    state = PipelineState.ASSEMBLING

    async def run(self, context: ProcessingContext) -> ProcessingContext:
        result = context.snapshot(success=True)
        context.state = PipelineState.DONE
        context.outcome = Processed(result)
        method = result.processing_method.value if result.processing_method else "n/a"
        Log.info(
            f"Document processed ({method}) "
            f"in {result.elapsed_ms}ms with {len(result.warnings)} warnings"
        )
        return context

