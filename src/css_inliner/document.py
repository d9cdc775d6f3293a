"""HTML document adapter built on lxml.html.

Elements are addressed by their position in :attr:`Document.elements`, an
arena in document order.  Looking an lxml element up goes through its
structural path (``/html/body/div[2]``), never through node identity.
"""

from __future__ import annotations

from typing import Iterator

import lxml.html
from lxml import etree

from css_inliner.errors import DocumentError

__all__ = ["Document"]

_HTML5_DOCTYPE = "<!DOCTYPE html>"


class Document:
    """A parsed HTML document whose ``style`` attributes can be rewritten."""

    def __init__(self, tree: etree._ElementTree) -> None:
        if tree.getroot() is None:
            raise DocumentError("Document has no root element")
        self.tree = tree
        self.elements: list[lxml.html.HtmlElement] = []
        self._paths: dict[str, int] = {}
        self._reindex()

    @classmethod
    def from_html(cls, html: str) -> Document:
        """Parse *html*; it is fed to lxml as UTF-8, so an XML declaration is harmless."""
        if not html or not html.strip():
            raise DocumentError("Cannot load an empty document")
        try:
            parser = lxml.html.HTMLParser(encoding="utf-8", default_doctype=False)
            root = lxml.html.document_fromstring(html.encode("utf-8"), parser=parser)
        except (etree.ParserError, ValueError) as exc:
            raise DocumentError(f"Failed to parse HTML: {exc}", cause=exc) from exc
        return cls(root.getroottree())

    @property
    def root(self) -> lxml.html.HtmlElement:
        return self.tree.getroot()

    def _reindex(self) -> None:
        self.elements = list(self.root.iter(etree.Element))
        self._paths = {
            self.tree.getpath(element): index
            for index, element in enumerate(self.elements)
        }

    def index_of(self, element: etree._Element) -> int | None:
        """Return the arena index of *element*, or None if it is not part of the document."""
        try:
            path = self.tree.getpath(element)
        except ValueError:
            return None
        return self._paths.get(path)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[lxml.html.HtmlElement]:
        return iter(self.elements)

    # --- stylesheets -----------------------------------------------------------

    def style_sheets(self) -> list[str]:
        """Return the text of every ``<style>`` element in document order."""
        return [style.text or "" for style in self.root.iter("style")]

    def remove_style_tags(self) -> None:
        for style in list(self.root.iter("style")):
            style.drop_tree()
        self._reindex()

    # --- serialisation ---------------------------------------------------------

    def to_html(self, pretty_print: bool = False) -> str:
        """Serialise the document: doctype (if any), a newline, then the root element."""
        try:
            html = lxml.html.tostring(
                self.root, method="html", encoding="unicode", pretty_print=pretty_print
            )
        except (TypeError, ValueError) as exc:
            raise DocumentError(f"Failed to serialise document: {exc}", cause=exc) from exc

        doctype = (self.tree.docinfo.doctype or "").strip()
        if doctype == _HTML5_DOCTYPE:
            doctype = doctype.lower()
        html = html.strip()
        return f"{doctype}\n{html}" if doctype else html
