import re

from pdfparser.rendering.builder import MarkdownBuilder
from pdfparser.rendering.general import is_all_caps

FORM_HEADER_MAX_LENGTH = 50
BLANK_FIELD = "________"

_CHECKBOX = re.compile(r"^(?P<box>\[\s*[xX✓✔]?\s*\]|☐|☑|☒|□|■)\s*(?P<label>.*)$")
_CHECKED = re.compile(r"[xX✓✔☑☒■]")
_BLANK_RULE = re.compile(r"_{3,}|\.{5,}")


class FormRenderer:
    """Renders section headers, fields, blank rules and checkboxes of forms."""

    def render_body(self, lines: list[str], builder: MarkdownBuilder) -> None:
        for raw in lines:
            line = raw.strip()
            if not line:
                continue
            if len(line) <= FORM_HEADER_MAX_LENGTH and is_all_caps(line) and ":" not in line:
                builder.heading(line, 3)
                continue
            checkbox = _CHECKBOX.match(line)
            if checkbox:
                mark = "x" if _CHECKED.search(checkbox.group("box")) else " "
                builder.item(f"[{mark}] {checkbox.group('label').strip()}".rstrip())
                continue
            if _BLANK_RULE.search(line):
                label = _BLANK_RULE.sub(" ", line).strip(" :\t")
                builder.item(f"**{label or 'Campo'}:** {BLANK_FIELD}")
                continue
            if ":" in line:
                label, _, value = line.partition(":")
                label = label.strip()
                if label:
                    builder.item(f"**{label}:** {value.strip() or BLANK_FIELD}")
                    continue
            builder.paragraph(line)
