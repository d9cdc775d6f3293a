"""Map tinycss2 token positions back to the CSS text they came from."""

from __future__ import annotations

__all__ = ["SourceText"]


class SourceText:
    """CSS text normalised the way tinycss2 normalises it.

    tinycss2 reports ``(source_line, source_column)`` for every node, with
    newlines already folded to ``\\n``.  Keeping the same folded text lets
    those positions be turned into string offsets, so values can be cut out
    of the source exactly as the author wrote them.
    """

    def __init__(self, text: str) -> None:
        self.text = (
            text.replace("\0", "\uFFFD")
            .replace("\r\n", "\n")
            .replace("\r", "\n")
            .replace("\f", "\n")
        )
        self._line_starts = [0]
        self._line_starts.extend(
            index + 1 for index, char in enumerate(self.text) if char == "\n"
        )

    def __len__(self) -> int:
        return len(self.text)

    def offset(self, node) -> int:
        """Return the string offset at which *node* starts."""
        return self._line_starts[node.source_line - 1] + node.source_column - 1

    def slice(self, start: int, end: int) -> str:
        return self.text[start:max(start, end)]
