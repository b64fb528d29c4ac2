from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    max_file_size: int = 52_428_800
    url_fetch_timeout_seconds: int = 30

    ai_enabled: bool = True
    fallback_to_local: bool = True
    max_text_length: int = 50_000
    use_ai_for_simple_only: bool = False
    local_processing_default: bool = False
    local_for_complex_documents: bool = True

    enrichment_provider: str = "openai"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o"
    openai_timeout_seconds: int = 30
    openai_rate_limit_rpm: int = 30
    openai_max_retries: int = 3
    openai_retry_delay_ms: int = 2000

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""

    openrouter_api_key: str = ""
    openrouter_model_name: str = ""
    groq_api_key: str = ""
    groq_model_name: str = ""
    together_api_key: str = ""
    together_model_name: str = ""
    deepseek_api_key: str = ""
    deepseek_model_name: str = ""
    ollama_api_key: str = "ollama"
    ollama_model_name: str = ""

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "pdfparser"
    db_username: str = "pdfparser"
    db_password: str = "secret"


@dataclass(frozen=True)
class ProcessingPolicy:
    """Routing and fallback flags the orchestrator evaluates once per request."""

    ai_enabled: bool = True
    fallback_to_local: bool = True
    max_text_length: int = 50_000
    use_ai_for_simple_only: bool = False
    local_processing_default: bool = False
    local_for_complex_documents: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProcessingPolicy":
        return cls(
            ai_enabled=settings.ai_enabled,
            fallback_to_local=settings.fallback_to_local,
            max_text_length=settings.max_text_length,
            use_ai_for_simple_only=settings.use_ai_for_simple_only,
            local_processing_default=settings.local_processing_default,
            local_for_complex_documents=settings.local_for_complex_documents,
        )
