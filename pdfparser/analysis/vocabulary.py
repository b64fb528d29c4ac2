"""Patterns and word lists for the local content analyzer."""

import re

DOCUMENT_TYPE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (
        "insurance",
        re.compile(
            r"\b(?:insurance|seguro|policy\s*(?:number|no\.?|#)|p[oó]liza|insured|asegurado"
            r"|premium|prima|deductible|deducible)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "invoice",
        re.compile(
            r"\b(?:invoice|factura|bill\s+to|amount\s+due|total\s+due|subtotal)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "contract",
        re.compile(
            r"\b(?:agreement|contract|contrato|acuerdo|hereinafter|whereas|the\s+parties)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "check",
        re.compile(
            r"\b(?:pay\s+to\s+the\s+order\s+of|check\s+(?:no\.?|number)|cheque|routing\s+number)\b",
            re.IGNORECASE,
        ),
    ),
]

CANNED_SUMMARIES = {
    "insurance": "Documento de seguro con información de la póliza, coberturas y datos del asegurado.",
    "invoice": "Factura con el detalle de conceptos, importes y condiciones de pago.",
    "contract": "Contrato que establece los términos y obligaciones acordados entre las partes.",
}

TOPIC_VOCABULARY: dict[str, tuple[str, ...]] = {
    "insurance": (
        "policy", "coverage", "premium", "deductible", "claim",
        "liability", "insured", "beneficiary",
    ),
    "invoice": ("invoice", "payment", "tax", "subtotal", "discount", "due date", "total"),
    "contract": (
        "agreement", "term", "termination", "obligations", "confidentiality",
        "payment", "liability", "jurisdiction",
    ),
    "check": ("payment", "amount", "bank", "account", "payee"),
    "general": (),
}

STOP_WORDS = frozenset(
    {
        "about", "above", "after", "again", "against", "because", "before", "being",
        "below", "between", "during", "further", "having", "itself", "should",
        "through", "under", "until", "which", "while", "within", "without", "would",
        "these", "those", "their", "there", "where", "other", "shall", "please",
        "además", "cuando", "desde", "donde", "durante", "entre", "hacia", "hasta",
        "mientras", "porque", "sobre", "también", "través", "nuestro", "nuestra",
        "puede", "pueden", "dicho", "dicha", "siempre", "cualquier",
    }
)

SPANISH_FUNCTION_WORDS = frozenset(
    {"el", "la", "de", "que", "y", "en", "los", "las", "del", "por", "con", "para", "una", "es", "se", "al"}
)
ENGLISH_FUNCTION_WORDS = frozenset(
    {"the", "and", "of", "to", "in", "is", "that", "for", "with", "on", "as", "by", "this", "are", "be", "from"}
)
LANGUAGE_MARGIN = 1.5

_DATE = r"(?:\d{1,2}[/-]\d{1,2}[/-]\d{2,4}|\d{4}-\d{2}-\d{2}|[A-Za-z]{3,9}\.?\s+\d{1,2},\s+\d{4})"
_AMOUNT = r"[$€£]\s?\d[\d,]*(?:\.\d{1,2})?"
_IDENTIFIER = r"([A-Z0-9][A-Z0-9\-/]{2,})"

POLICY_NUMBER = re.compile(
    rf"(?:policy\s*(?:number|no\.?|#)|n[uú]mero\s+de\s+p[oó]liza|p[oó]liza\s*(?:no\.?|#))\s*[:#]?\s*{_IDENTIFIER}",
    re.IGNORECASE,
)
CLAIM_NUMBER = re.compile(
    rf"(?:claim\s*(?:number|no\.?|#)|n[uú]mero\s+de\s+(?:reclamo|siniestro))\s*[:#]?\s*{_IDENTIFIER}",
    re.IGNORECASE,
)
INSURED_PARTY = re.compile(
    r"(?:named\s+insured|insured(?:\s+party|\s+name)?|asegurado)\s*:\s*(?P<value>[^\n]+)",
    re.IGNORECASE,
)
EFFECTIVE_DATE = re.compile(
    rf"(?:effective(?:\s+date)?|fecha\s+de\s+inicio|vigencia\s+desde)\s*:?\s*(?P<value>{_DATE})",
    re.IGNORECASE,
)
EXPIRATION_DATE = re.compile(
    rf"(?:expiration(?:\s+date)?|expiry(?:\s+date)?|fecha\s+de\s+vencimiento|vigencia\s+hasta)\s*:?\s*(?P<value>{_DATE})",
    re.IGNORECASE,
)
PREMIUM = re.compile(
    rf"(?:total\s+)?(?:premium|prima)\s*:?\s*(?P<value>{_AMOUNT})",
    re.IGNORECASE,
)
COVERAGE_LINE = re.compile(
    rf"^\s*(?P<type>[^\n:$€£]*?(?:coverage|cobertura|liability|limit|l[ií]mite|deductible|deducible)[^\n:$€£]*?)"
    rf"\s*[:\-]\s*(?P<amount>{_AMOUNT})",
    re.IGNORECASE | re.MULTILINE,
)

KEY_POINT_PATTERNS = [
    re.compile(_AMOUNT),
    re.compile(_DATE),
    re.compile(
        r"\b(?:policy|claim|invoice|account|reference|p[oó]liza|factura|cuenta|referencia)"
        r"\s*(?:number|no\.?|#|n[uú]mero)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:total|premium|prima|deductible|deducible|balance|amount\s+due|saldo|importe)\b",
        re.IGNORECASE,
    ),
    re.compile(r"\b(?=[A-Z0-9-]*\d)(?=[A-Z0-9-]*[A-Z])[A-Z0-9-]{8,}\b"),
]

BULLET_START = re.compile(r"^(?:[•●▪◦·\-\*–]|\d{1,3}[.)])\s+")
WORD = re.compile(r"[a-záéíóúñü]+")
