"""Offline completion client.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in EnrichmentClientFactory.
"""

import json
from typing import ClassVar

from pdfparser.enrichment.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Returns fixed markdown, or a fixed analysis object for JSON requests.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_MARKDOWN: ClassVar[str] = "# Documento\n\nContenido convertido por el servicio remoto.\n"
    DEFAULT_ANALYSIS: ClassVar[dict[str, object]] = {
        "summary": "Resumen generado por el servicio remoto.",
        "mainTopics": [],
        "keyPoints": [],
        "language": "unknown",
        "documentType": "general",
    }

    def __init__(
        self,
        markdown: str | None = None,
        analysis: dict[str, object] | None = None,
    ) -> None:
        self._markdown = markdown if markdown is not None else self.DEFAULT_MARKDOWN
        self._analysis = analysis if analysis is not None else self.DEFAULT_ANALYSIS
        self.calls: list[dict[str, object]] = []

    async def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
        json_response: bool = False,
    ) -> str:
        self.calls.append(
            {
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "json_response": json_response,
            }
        )
        if json_response:
            return json.dumps(self._analysis)
        return self._markdown
