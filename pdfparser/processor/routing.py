from dataclasses import dataclass

from pdfparser.classification.models import ClassificationResult, DocumentKind, TextQuality
from pdfparser.config.settings import ProcessingPolicy
from pdfparser.processor.models import ExtractionOptions


@dataclass(frozen=True)
class RoutingDecision:
    use_remote: bool
    reason: str


class ProcessingRouter:
    """Chooses between the local heuristics and the remote completion service.

    Checks run in a fixed order and the first one that forces the local path
    wins.
    """

    def __init__(self, policy: ProcessingPolicy, remote_available: bool = True) -> None:
        self._policy = policy
        self._remote_available = remote_available

    def decide(
        self,
        classification: ClassificationResult,
        text: str,
        options: ExtractionOptions,
    ) -> RoutingDecision:
        policy = self._policy
        if not policy.ai_enabled or not self._remote_available:
            return RoutingDecision(False, "remote processing disabled")
        if options.use_local_processing:
            return RoutingDecision(False, "local processing requested")
        if policy.local_processing_default:
            return RoutingDecision(False, "local processing is the default")
        if policy.local_for_complex_documents:
            reason = self._complexity_reason(classification, text)
            if reason:
                return RoutingDecision(False, reason)
        if policy.use_ai_for_simple_only and not self._is_simple(classification, text):
            return RoutingDecision(False, "remote processing reserved for simple documents")
        return RoutingDecision(True, "remote processing")

    def _complexity_reason(self, classification: ClassificationResult, text: str) -> str | None:
        kind = classification.document_kind
        if kind is DocumentKind.PROTECTED:
            return "protected document"
        if kind is DocumentKind.SCANNED and classification.text_character_count == 0:
            return "scanned document without text"
        if classification.text_quality in (TextQuality.LOW, TextQuality.NONE):
            return f"text quality {classification.text_quality.value}"
        if len(text) > self._policy.max_text_length:
            return f"text longer than {self._policy.max_text_length} chars"
        if kind is DocumentKind.MIXED and classification.requires_ocr:
            return "mixed document requiring OCR"
        return None

    def _is_simple(self, classification: ClassificationResult, text: str) -> bool:
        return (
            classification.document_kind is DocumentKind.NATIVE
            and classification.text_quality is TextQuality.HIGH
            and len(text) < self._policy.max_text_length
        )
