"""Conversion entry points: resolve the cascade and write style attributes."""

from __future__ import annotations

import logging
from typing import Iterable

from lxml import etree

from css_inliner.cascade import ElementAccumulator, order_rules, reconcile
from css_inliner.config import InlinerConfig
from css_inliner.css import parse_inline, parse_stylesheet, serialize
from css_inliner.document import Document
from css_inliner.model import Declaration, StyleRule
from css_inliner.selectors import SelectorMatcher

__all__ = ["CssToInlineStyles", "convert"]

logger = logging.getLogger(__name__)


class CssToInlineStyles:
    """Inline stylesheet rules into the ``style`` attribute of matched elements.

    Rules come from the document's own ``<style>`` elements followed by any
    CSS passed to :meth:`convert`.  Declarations already present in an
    element's ``style`` attribute always win over stylesheet ones.
    """

    def __init__(self, config: InlinerConfig | None = None) -> None:
        self.config = config or InlinerConfig()

    def convert(self, html: str, css: str | Iterable[str] | None = None) -> str:
        """Return *html* with its CSS (and *css*, if given) inlined.

        *css* is one stylesheet or several.  Each is parsed on its own, so an
        unterminated block in one cannot swallow the rules of the next.

        Raises:
            DocumentError: if *html* cannot be parsed or serialised.
        """
        document = Document.from_html(html)

        rules: list[StyleRule] = []
        for sheet in document.style_sheets():
            rules = parse_stylesheet(sheet, rules)
        if isinstance(css, str):
            css = [css]
        for sheet in css or ():
            rules = parse_stylesheet(sheet, rules)

        self.inline(document, rules)

        if self.config.remove_style_tags:
            document.remove_style_tags()
        return document.to_html(pretty_print=self.config.pretty_print)

    def inline(self, document: Document, rules: Iterable[StyleRule]) -> Document:
        """Resolve *rules* against *document* and rewrite matched elements in place."""
        rules = order_rules(rules)
        if not rules:
            return document

        matcher = SelectorMatcher(document)
        accumulator = ElementAccumulator()
        for rule in rules:
            for index in matcher.match(rule.selector):
                accumulator.apply(index, rule)

        for index, winners in accumulator:
            self.inline_css_on_element(document.elements[index], winners.values())

        logger.info(
            "Inlined %d rule(s) into %d element(s)", len(rules), len(accumulator)
        )
        return document

    def get_inline_styles(self, element: etree._Element) -> list[Declaration]:
        """Return the declarations of *element*'s current ``style`` attribute."""
        return parse_inline(element.get("style"))

    def inline_css_on_element(
        self, element: etree._Element, declarations: Iterable[Declaration]
    ) -> etree._Element:
        """Write *declarations* into *element*'s ``style`` attribute.

        Inline declarations already on the element take priority.  With no
        *declarations* the element is returned untouched.  A name given more
        than once in *declarations* keeps its last value.
        """
        by_name: dict[str, Declaration] = {}
        for decl in declarations:
            by_name[decl.name] = decl
        if not by_name:
            return element

        final = reconcile(self.get_inline_styles(element), by_name.values())
        element.set("style", serialize(final))
        return element


def convert(
    html: str,
    css: str | Iterable[str] | None = None,
    config: InlinerConfig | None = None,
) -> str:
    """Shortcut for ``CssToInlineStyles(config).convert(html, css)``."""
    return CssToInlineStyles(config).convert(html, css)
