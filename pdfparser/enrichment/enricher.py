"""Remote markdown conversion and content analysis."""

import json
from pathlib import Path

from pdfparser.analysis.models import AnalysisResult
from pdfparser.classification.models import ClassificationResult, DocumentKind, TextQuality
from pdfparser.enrichment.client_base import BaseCompletionClient
from pdfparser.enrichment.dispatcher import RemoteCallDispatcher
from pdfparser.enrichment.exceptions import RemoteContentError
from pdfparser.enrichment.prompt_loader import load_prompt_template
from pdfparser.logging.logger import Log
from pdfparser.processor.models import ExtractionOptions

MARKDOWN_TEMPERATURE = 0.3
ANALYSIS_TEMPERATURE = 0.3
ANALYSIS_MAX_TOKENS = 1000
ANALYSIS_INPUT_CHARS = 8000

_KIND_NOTES = {
    DocumentKind.MIXED: (
        "NOTE: This PDF looks like a mixed document with possible OCR text. "
        "Account for recognition errors."
    ),
    DocumentKind.FORM_BASED: (
        "NOTE: This PDF contains forms. Try to preserve the structure of the form fields."
    ),
}
_QUALITY_NOTES = {
    TextQuality.LOW: (
        "NOTE: The extracted text quality is low. There may be OCR errors or "
        "misrecognized characters."
    ),
    TextQuality.NONE: (
        "NOTE: No text was detected in the original PDF. The content may be incomplete."
    ),
}


def parse_json_object(raw: str) -> dict[str, object]:
    """Parse a JSON object, tolerating markdown code fences around it.

    Raises:
        RemoteContentError: if the content is not a JSON object.
    """
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise RemoteContentError(f"Invalid JSON response: {exc}") from exc

    if not isinstance(parsed, dict):
        raise RemoteContentError("JSON response must be an object")
    return parsed


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None and str(item).strip()]


class RemoteEnricher:
    """Sends text to the completion service through the shared dispatcher."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        dispatcher: RemoteCallDispatcher,
        model: str,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._dispatcher = dispatcher
        self._model = model
        self._markdown_system = load_prompt_template("markdown_system.txt", prompt_dir)
        self._markdown_user = load_prompt_template("markdown_user.txt", prompt_dir)
        self._analysis_system = load_prompt_template("analysis_system.txt", prompt_dir)

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        *,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
        temperature: float,
        json_response: bool = False,
    ) -> str:
        """Run one completion through the dispatcher's queue and retry policy."""
        return await self._dispatcher.submit(
            lambda: self._client.create_completion(
                model=self._model,
                temperature=temperature,
                max_tokens=max_tokens,
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                json_response=json_response,
            )
        )

    async def convert_to_markdown(
        self,
        text: str,
        options: ExtractionOptions,
        classification: ClassificationResult,
    ) -> str:
        system_prompt = self._markdown_system.format(notes=self._prompt_notes(classification))
        instructions = (
            f"\nAdditional instructions: {options.instructions}\n" if options.instructions else ""
        )
        user_prompt = self._markdown_user.format(instructions=instructions, text=text)
        markdown = await self.complete(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            max_tokens=options.max_tokens,
            temperature=MARKDOWN_TEMPERATURE,
        )
        Log.info(f"Remote markdown conversion returned {len(markdown)} chars")
        return markdown

    async def analyze(self, text: str) -> AnalysisResult:
        raw = await self.complete(
            system_prompt=self._analysis_system,
            user_prompt=text[:ANALYSIS_INPUT_CHARS],
            max_tokens=ANALYSIS_MAX_TOKENS,
            temperature=ANALYSIS_TEMPERATURE,
            json_response=True,
        )
        Log.debug(f"Remote analysis raw response:\n{raw}")
        parsed = parse_json_object(raw)
        return AnalysisResult(
            summary=str(parsed.get("summary") or ""),
            main_topics=_string_list(parsed.get("mainTopics")),
            key_points=_string_list(parsed.get("keyPoints")),
            language=str(parsed.get("language") or "unknown"),
            document_type=str(parsed.get("documentType") or "general"),
        )

    @staticmethod
    def _prompt_notes(classification: ClassificationResult) -> str:
        notes = [
            note
            for note in (
                _KIND_NOTES.get(classification.document_kind),
                _QUALITY_NOTES.get(classification.text_quality),
            )
            if note
        ]
        return "".join(f"\n{note}" for note in notes)
