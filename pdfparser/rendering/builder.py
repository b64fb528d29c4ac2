class MarkdownBuilder:
    """Accumulates markdown blocks; consecutive list items share one block."""

    def __init__(self) -> None:
        self._blocks: list[list[str]] = []
        self._in_list = False

    def heading(self, text: str, level: int = 2) -> None:
        self._push([f"{'#' * level} {text}"])

    def paragraph(self, text: str) -> None:
        self._push([text])

    def quote(self, text: str) -> None:
        self._push([f"> {text}"])

    def item(self, text: str) -> None:
        if self._in_list:
            self._blocks[-1].append(f"- {text}")
            return
        self._blocks.append([f"- {text}"])
        self._in_list = True

    def build(self) -> str:
        return "\n\n".join("\n".join(block) for block in self._blocks) + "\n"

    def _push(self, block: list[str]) -> None:
        self._blocks.append(block)
        self._in_list = False
