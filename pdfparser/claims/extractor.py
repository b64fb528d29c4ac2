import asyncio
import time
from pathlib import Path

from pdfparser.claims.exceptions import ClaimsExtractionError
from pdfparser.claims.models import ClaimsDocument, ClaimsExtractionResult, ExtractionConfig
from pdfparser.claims.store import BaseExtractionConfigStore, PostgresExtractionConfigStore
from pdfparser.config.settings import Settings
from pdfparser.enrichment.dispatcher import RemoteCallDispatcher
from pdfparser.enrichment.enricher import RemoteEnricher
from pdfparser.enrichment.exceptions import RemoteServiceError
from pdfparser.enrichment.factory import build_enricher
from pdfparser.enrichment.prompt_loader import load_prompt_template
from pdfparser.logging.logger import Log
from pdfparser.pdf.base import BasePdfReader
from pdfparser.pdf.exceptions import PdfExtractionError
from pdfparser.pdf.factory import PdfReaderFactory

CLAIMS_TEMPERATURE = 0.1
CLAIMS_MAX_TOKENS = 1000


class ClaimsExtractor:
    """Pulls one configured field out of each matching document.

    Files are matched to configurations by exact filename. Every configured
    fieldname appears in the result, empty when nothing could be extracted.
    """

    def __init__(
        self,
        store: BaseExtractionConfigStore,
        reader: BasePdfReader,
        enricher: RemoteEnricher,
        prompt_dir: Path | None = None,
    ) -> None:
        self._store = store
        self._reader = reader
        self._enricher = enricher
        self._system_template = load_prompt_template("claims_system.txt", prompt_dir)
        self._user_template = load_prompt_template("claims_user.txt", prompt_dir)

    async def extract_from_documents(self, files: list[ClaimsDocument]) -> ClaimsExtractionResult:
        started = time.monotonic()
        Log.info(f"Processing {len(files)} files for claims extraction")
        configs = {config.filename: config for config in self._store.list_configs()}
        Log.info(f"Found {len(configs)} extraction configurations")

        data: dict[str, str] = {}
        warnings: list[str] = []
        processed = 0
        for document in files:
            config = configs.get(document.filename)
            if config is None:
                Log.warning(f"No configuration found for file: {document.filename} - ignoring")
                warnings.append(f"No configuration found for file: {document.filename}")
                continue

            Log.info(f"Processing file: {document.filename} with fieldname: {config.fieldname}")
            processed += 1
            try:
                data[config.fieldname] = await self._extract_field(document, config)
            except (PdfExtractionError, RemoteServiceError) as exc:
                Log.error(f"Error processing file {document.filename}: {exc}")
                warnings.append(f"Error processing file {document.filename}: {exc}")
                data[config.fieldname] = ""

        for config in configs.values():
            data.setdefault(config.fieldname, "")

        return ClaimsExtractionResult(
            success=True,
            data=data,
            documents_processed=processed,
            processing_time_ms=int((time.monotonic() - started) * 1000),
            model_used=self._enricher.model,
            warnings=warnings,
        )

    async def _extract_field(self, document: ClaimsDocument, config: ExtractionConfig) -> str:
        layer = await asyncio.to_thread(self._reader.read, document.content)
        text = layer.text
        answer = await self._enricher.complete(
            system_prompt=self._system_template.format(
                prompt=config.prompt, example=config.example
            ),
            user_prompt=self._user_template.format(text=text),
            max_tokens=CLAIMS_MAX_TOKENS,
            temperature=CLAIMS_TEMPERATURE,
        )
        answer = answer.strip()
        Log.info(f"Claims extraction for {document.filename} returned {len(answer)} chars")
        return answer


def build_claims_extractor(
    settings: Settings,
    dispatcher: RemoteCallDispatcher,
    store: BaseExtractionConfigStore | None = None,
) -> ClaimsExtractor:
    """Build a ClaimsExtractor backed by the PostgreSQL store by default.

    Raises:
        ClaimsExtractionError: if remote processing is disabled.
    """
    enricher = build_enricher(settings, dispatcher)
    if enricher is None:
        raise ClaimsExtractionError("Claims extraction requires AI_ENABLED=true")
    return ClaimsExtractor(
        store=store if store is not None else PostgresExtractionConfigStore(),
        reader=PdfReaderFactory.create(settings),
        enricher=enricher,
    )
