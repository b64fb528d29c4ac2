import re

from pdfparser.rendering.builder import MarkdownBuilder
from pdfparser.rendering.general import GeneralRenderer, format_key_value, split_key_value

INSURANCE_KEYWORDS = ("policy", "coverage", "claim", "insured", "premium", "deductible", "farmers")
INSURANCE_KEYWORD_THRESHOLD = 3

MONEY_GLYPH = "💰"
PHONE_GLYPH = "📞"

SECTION_POLICY = "📋 Información de la Póliza"
SECTION_COVERAGE = "💰 Información de Cobertura"
SECTION_CONTACT = "📞 Información de Contacto"
SECTION_GENERAL = "📄 Información General"

_CONTACT = re.compile(
    r"\b(?:phone|tel[eé]fono|tel|fax|e-?mail|correo|address|direcci[oó]n|contact|contacto)\b"
    r"|@|\(\d{3}\)\s?\d{3}-\d{4}|\b\d{3}[-.]\d{3}[-.]\d{4}\b",
    re.IGNORECASE,
)
_POLICY = re.compile(
    r"\b(?:policy|p[oó]liza|insured|asegurado|named|effective|expiration|vigencia"
    r"|claim|reclamo|siniestro|agent|agente)\b",
    re.IGNORECASE,
)
_COVERAGE = re.compile(
    r"\b(?:coverage|cobertura|premium|prima|deductible|deducible|limit|l[ií]mite"
    r"|liability|responsabilidad)\b|[$€£]\s?\d",
    re.IGNORECASE,
)
_CURRENCY = re.compile(r"(?<![\w$€£])([$€£]\s?\d[\d,]*(?:\.\d{1,2})?)")


def is_insurance_text(text: str) -> bool:
    """True when at least three distinct insurance keywords occur."""
    lowered = text.lower()
    hits = sum(1 for keyword in INSURANCE_KEYWORDS if keyword in lowered)
    return hits >= INSURANCE_KEYWORD_THRESHOLD


def mark_amounts(text: str) -> str:
    return _CURRENCY.sub(rf"{MONEY_GLYPH} \1", text)


def _format_line(line: str) -> str:
    pair = split_key_value(line)
    return format_key_value(*pair) if pair else line


class InsuranceRenderer:
    """Buckets insurance lines into policy, coverage, contact and general sections."""

    def __init__(self) -> None:
        self._general = GeneralRenderer()

    def render_body(self, lines: list[str], builder: MarkdownBuilder) -> None:
        policy: list[str] = []
        coverage: list[str] = []
        contact: list[str] = []
        general: list[str] = []

        for raw in lines:
            line = raw.strip()
            if not line:
                general.append("")
            elif _CONTACT.search(line):
                contact.append(line)
            elif _POLICY.search(line):
                policy.append(line)
            elif _COVERAGE.search(line):
                coverage.append(line)
            else:
                general.append(line)

        if policy:
            builder.heading(SECTION_POLICY, 2)
            for line in policy:
                builder.item(_format_line(line))
        if coverage:
            builder.heading(SECTION_COVERAGE, 2)
            for line in coverage:
                builder.item(mark_amounts(_format_line(line)))
        if contact:
            builder.heading(SECTION_CONTACT, 2)
            for line in contact:
                builder.item(f"{PHONE_GLYPH} {_format_line(line)}")
        if any(general):
            builder.heading(SECTION_GENERAL, 2)
            self._general.render_body(general, builder)
