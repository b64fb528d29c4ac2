from pdfparser.analysis.analyzer import LocalContentAnalyzer
from pdfparser.classification.classifier import PdfClassifier
from pdfparser.config.settings import ProcessingPolicy, Settings
from pdfparser.enrichment.dispatcher import DispatcherConfig, RemoteCallDispatcher
from pdfparser.enrichment.exceptions import RemoteServiceError
from pdfparser.enrichment.factory import build_enricher
from pdfparser.extraction.exceptions import ExtractionError
from pdfparser.extraction.strategies import build_strategy_selector
from pdfparser.logging.logger import Log
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.factory import PdfReaderFactory
from pdfparser.pdf.inspector import PdfInspector
from pdfparser.processor.file_loader import DocumentFetcher
from pdfparser.processor.models import (
    ErrorCode,
    ExtractionOptions,
    Failed,
    ProcessingOutcome,
)
from pdfparser.processor.pipeline import PipelineStep, ProcessingContext
from pdfparser.processor.routing import ProcessingRouter
from pdfparser.processor.steps import (
    AnalyzeStep,
    AssembleStep,
    ClassifyStep,
    ExtractStep,
    RenderStep,
    SelectPathStep,
    ValidateStep,
)
from pdfparser.rendering.renderer import LocalMarkdownRenderer


class PdfProcessor:
    """Orchestrates the document pipeline.

    Pipeline: classify -> validate -> extract -> select path -> render
    -> analyze -> assemble. A step may end the run early by setting an
    outcome (protected documents stop after classification).
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        dispatcher: RemoteCallDispatcher | None = None,
        fetcher: DocumentFetcher | None = None,
    ) -> None:
        self._steps = steps
        self._dispatcher = dispatcher
        self._fetcher = fetcher

    async def process(
        self, pdf_bytes: bytes, options: ExtractionOptions | None = None
    ) -> ProcessingOutcome:
        """Run the pipeline for one document.

        Remote and extraction failures that escape the steps are returned as
        Failed with the partial result computed so far.
        """
        context = ProcessingContext(raw_bytes=pdf_bytes, options=options or ExtractionOptions())
        Log.info(f"Processing document ({len(pdf_bytes)} bytes)")
        try:
            for step in self._steps:
                context.state = step.state
                Log.debug(f"Pipeline state: {step.state.value}")
                context = await step.run(context)
                if context.outcome is not None:
                    return context.outcome
        except RemoteServiceError as exc:
            return self._failed(context, ErrorCode.REMOTE_SERVICE_UNAVAILABLE, exc)
        except (ExtractionError, PdfExtractionError) as exc:
            return self._failed(context, ErrorCode.PROCESSING_FAILED, exc)
        raise RuntimeError("Pipeline finished without producing an outcome")

    async def process_url(
        self, url: str, options: ExtractionOptions | None = None
    ) -> ProcessingOutcome:
        """Download a document and process it.

        Raises:
            DocumentFetchError: if the download fails.
            FileTooLargeError: if the download exceeds the size limit.
        """
        if self._fetcher is None:
            raise RuntimeError("PdfProcessor was built without a document fetcher")
        pdf_bytes = await self._fetcher.fetch(url)
        return await self.process(pdf_bytes, options)

    async def aclose(self) -> None:
        if self._dispatcher is not None:
            await self._dispatcher.aclose()

    @staticmethod
    def _failed(context: ProcessingContext, code: ErrorCode, exc: Exception) -> Failed:
        message = f"{type(exc).__name__}: {exc}"
        Log.error(f"Processing failed in state {context.state.value} ({code.value}): {message}")
        return Failed(
            error_code=code,
            message=message,
            result=context.snapshot(success=False, error=code),
        )


def build_processor(
    settings: Settings,
    dispatcher: RemoteCallDispatcher | None = None,
) -> PdfProcessor:
    """Build a PdfProcessor with all required adapters."""
    reader = PdfReaderFactory.create(settings)
    inspector = PdfInspector()
    dispatcher = dispatcher or RemoteCallDispatcher(DispatcherConfig.from_settings(settings))
    enricher = build_enricher(settings, dispatcher)
    policy = ProcessingPolicy.from_settings(settings)
    router = ProcessingRouter(policy, remote_available=enricher is not None)
    renderer = LocalMarkdownRenderer()
    steps: list[PipelineStep] = [
        ClassifyStep(PdfClassifier(reader, inspector)),
        ValidateStep(),
        ExtractStep(build_strategy_selector(reader, inspector), inspector),
        SelectPathStep(router),
        RenderStep(renderer, enricher, policy),
        AnalyzeStep(LocalContentAnalyzer(), enricher, policy),
        AssembleStep(),
    ]
    fetcher = DocumentFetcher(settings.max_file_size, settings.url_fetch_timeout_seconds)
    return PdfProcessor(steps, dispatcher=dispatcher, fetcher=fetcher)
