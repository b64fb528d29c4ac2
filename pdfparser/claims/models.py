from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractionConfig:
    """One row of the configuration store: how to extract a field from a file."""

    filename: str
    fieldname: str
    prompt: str
    example: str = ""


@dataclass(frozen=True)
class ClaimsDocument:
    filename: str
    content: bytes


@dataclass(frozen=True)
class ClaimsExtractionResult:
    success: bool
    data: dict[str, str]
    documents_processed: int
    processing_time_ms: int
    model_used: str
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "data": dict(self.data),
            "documentsProcessed": self.documents_processed,
            "processingTimeMs": self.processing_time_ms,
            "modelUsed": self.model_used,
            "warnings": list(self.warnings),
        }
