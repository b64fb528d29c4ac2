"""Line-oriented heuristics shared by the local markdown renderers."""

import re

from pdfparser.rendering.builder import MarkdownBuilder

TITLE_MAX_LENGTH = 60
KEY_VALUE_COLON_LIMIT = 50
PARAGRAPH_LINE_LENGTH = 40

_SECTION_TITLE = re.compile(
    r"^(?:\d+(?:\.\d+)+\.?\s+\S"
    r"|(?:section|secci[oó]n|chapter|cap[ií]tulo|article|art[ií]culo|part|parte)\s+[\dIVXLC]+\b"
    r"|[IVXLC]+\.\s+\S)",
    re.IGNORECASE,
)
_BULLET = re.compile(r"^(?:[•●▪◦·\-\*–]|\d{1,3}[.)]|[a-zA-Z][.)])\s+(?P<content>\S.*)$")
_NUMBERED = re.compile(r"^\d{1,3}[.)]\s+\S")


def is_all_caps(line: str) -> bool:
    letters = [c for c in line if c.isalpha()]
    return len(letters) >= 2 and line.upper() == line


def is_title(line: str) -> bool:
    if len(line) > TITLE_MAX_LENGTH:
        return False
    return is_all_caps(line) or bool(_SECTION_TITLE.match(line))


def is_numbered_heading(line: str) -> bool:
    """Numbered all-caps lines such as "1. INTRODUCTION" are titles, not list items."""
    return bool(_NUMBERED.match(line)) and is_title(line)


def bullet_content(line: str) -> str | None:
    match = _BULLET.match(line)
    return match.group("content").strip() if match else None


def split_key_value(line: str) -> tuple[str, str] | None:
    """Split 'Key: value' when the colon sits after position 2 and within 50 chars."""
    index = line.find(":")
    if index <= 2 or index >= KEY_VALUE_COLON_LIMIT:
        return None
    if line[index + 1:index + 3] == "//":
        return None
    key = line[:index].strip()
    if not key:
        return None
    return key, line[index + 1:].strip()


def format_key_value(key: str, value: str) -> str:
    return f"**{key}:** {value}".rstrip()


class GeneralRenderer:
    """Renders titles, key/value fields, bullets and paragraphs.

    Prose lines are buffered: lines longer than PARAGRAPH_LINE_LENGTH keep
    the paragraph open, and the first line at or under that length closes it
    as the paragraph's last line. Titles, fields, bullets, blank lines and the
    end of input also close the buffer.
    """

    def render_body(self, lines: list[str], builder: MarkdownBuilder) -> None:
        paragraph: list[str] = []

        def flush() -> None:
            if paragraph:
                builder.paragraph(" ".join(paragraph))
                paragraph.clear()

        for raw in lines:
            line = raw.strip()
            if not line:
                flush()
                continue
            if is_numbered_heading(line):
                flush()
                builder.heading(line, 2)
                continue
            content = bullet_content(line)
            if content is not None:
                flush()
                builder.item(content)
                continue
            pair = split_key_value(line)
            if pair is not None:
                flush()
                builder.item(format_key_value(*pair))
                continue
            if is_title(line):
                flush()
                builder.heading(line, 2)
                continue
            paragraph.append(line)
            if len(line) <= PARAGRAPH_LINE_LENGTH:
                flush()
        flush()
