"""Selector matching: CSS selector text to element indices via XPath."""

from __future__ import annotations

import logging

from lxml import etree
from lxml.cssselect import CSSSelector, SelectorError

from css_inliner.document import Document

__all__ = ["SelectorMatcher"]

logger = logging.getLogger(__name__)


class SelectorMatcher:
    """Match selectors against one document.

    Selectors that cannot be translated to XPath (pseudo-elements, syntax
    errors, unsupported pseudo-classes) match nothing.
    """

    def __init__(self, document: Document) -> None:
        self.document = document
        self._compiled: dict[str, CSSSelector | None] = {}

    def compile(self, selector: str) -> CSSSelector | None:
        if selector not in self._compiled:
            try:
                self._compiled[selector] = CSSSelector(selector, translator="html")
            except (SelectorError, etree.XPathError) as exc:
                logger.debug("Skipping selector %r: %s", selector, exc)
                self._compiled[selector] = None
        return self._compiled[selector]

    def match(self, selector: str) -> list[int]:
        """Return the indices of the elements *selector* matches, in document order."""
        compiled = self.compile(selector)
        if compiled is None:
            return []
        try:
            found = compiled(self.document.root)
        except etree.XPathError as exc:
            logger.debug("Skipping selector %r: %s", selector, exc)
            return []

        indices = []
        for element in found:
            index = self.document.index_of(element)
            if index is not None:
                indices.append(index)
        return indices
