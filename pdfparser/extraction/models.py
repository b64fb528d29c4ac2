from dataclasses import dataclass
from enum import Enum


class StrategyKind(str, Enum):
    NATIVE = "native"
    OCR = "ocr"
    FORM = "form"
    DECRYPT_FIRST = "decrypt_first"


@dataclass(frozen=True)
class ExtractedText:
    """Text produced by one extraction strategy.

    notice carries a human-readable marker when the strategy could only
    partly do its job, e.g. the OCR placeholder.
    """

    text: str
    strategy: StrategyKind
    notice: str | None = None
