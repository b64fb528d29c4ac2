from typing import ClassVar

from pdfparser.config.settings import Settings
from pdfparser.enrichment.client_base import BaseCompletionClient
from pdfparser.enrichment.dispatcher import RemoteCallDispatcher
from pdfparser.enrichment.enricher import RemoteEnricher
from pdfparser.enrichment.example_client_adapter import ExampleClientAdapter
from pdfparser.enrichment.openai_client_adapter import OpenAIClientAdapter


class EnrichmentClientFactory:
    """Creates the completion client for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create_client(cls, settings: Settings) -> BaseCompletionClient:
        provider = settings.enrichment_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def resolve_model_name(cls, settings: Settings) -> str:
        provider = settings.enrichment_provider.lower()
        key_map = {
            "example": "example",
            "openai": settings.openai_model_name,
            "openai_compatible": settings.openai_compatible_model_name,
            "openrouter": settings.openrouter_model_name,
            "groq": settings.groq_model_name,
            "together": settings.together_model_name,
            "deepseek": settings.deepseek_model_name,
            "ollama": settings.ollama_model_name,
        }
        return key_map.get(provider, "") or settings.openai_model_name

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "enrichment_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown enrichment provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "groq": settings.groq_api_key,
            "together": settings.together_api_key,
            "deepseek": settings.deepseek_api_key,
            "ollama": settings.ollama_api_key,
        }
        return key_map.get(provider, "") or ""


def build_enricher(settings: Settings, dispatcher: RemoteCallDispatcher) -> RemoteEnricher | None:
    """Build the remote enricher, or None when remote processing is disabled."""
    if not settings.ai_enabled:
        return None
    return RemoteEnricher(
        client=EnrichmentClientFactory.create_client(settings),
        dispatcher=dispatcher,
        model=EnrichmentClientFactory.resolve_model_name(settings),
    )
