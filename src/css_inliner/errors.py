"""Error hierarchy for the CSS inliner."""

from __future__ import annotations


class InlinerError(Exception):
    """Base error for all css_inliner errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DocumentError(InlinerError):
    """Raised when the HTML document cannot be loaded or serialised."""


class StylesheetLoadError(InlinerError):
    """Raised when an external stylesheet cannot be read or fetched."""

    def __init__(
        self, message: str, *, source: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause=cause)
        self.source = source


class CascadeContractError(InlinerError):
    """Raised when a declaration without origin specificity reaches the merger.

    Only stylesheet-derived declarations carry a specificity, and only those
    may compete in the cascade.  Seeing this error means the caller wired an
    inline declaration into the merge path.
    """
