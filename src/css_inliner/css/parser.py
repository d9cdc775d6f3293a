"""Stylesheet parser: CSS text to a flat list of single-selector StyleRules.

Built on tinycss2.  At-rules (``@media``, ``@font-face``, ``@import`` ...)
are dropped: only plain style rules can be inlined.  A selector list such as
``h1, h2 { ... }`` yields one StyleRule per selector.
"""

from __future__ import annotations

import logging
from typing import Sequence

import tinycss2

from css_inliner.css.properties import parse_declarations
from css_inliner.css.source import SourceText
from css_inliner.model import StyleRule

__all__ = ["parse_stylesheet", "split_selectors"]

logger = logging.getLogger(__name__)


def split_selectors(prelude: list) -> list[str]:
    """Split a rule prelude on its top-level commas.

    Commas nested in functional pseudo-classes such as ``:not(a, b)`` live
    inside function tokens and are left alone.  Comments are dropped.
    """
    groups: list[list] = [[]]
    for token in prelude:
        if token.type == "comment":
            continue
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    selectors = []
    for group in groups:
        text = tinycss2.serialize(group).strip()
        if text:
            selectors.append(text)
    return selectors


def _block_bodies(source: SourceText, tokens: list) -> dict[int, str]:
    """Source text between the braces of each top-level ``{}`` block.

    Top-level tokens are contiguous, so a block ends one character before
    the token that follows it.  Keyed by ``id()`` of the block's content
    list, which tinycss2 hands on unchanged as ``QualifiedRule.content``.
    """
    bodies: dict[int, str] = {}
    for index, token in enumerate(tokens):
        if token.type != "{} block":
            continue
        start = source.offset(token) + 1
        if index + 1 < len(tokens):
            end = source.offset(tokens[index + 1]) - 1
        elif source.text.endswith("}"):
            end = len(source) - 1
        else:
            end = len(source)
        bodies[id(token.content)] = source.slice(start, end)
    return bodies


def parse_stylesheet(
    css_text: str, existing: Sequence[StyleRule] = ()
) -> list[StyleRule]:
    """Parse *css_text* and append its rules to *existing*.

    Sequence numbers continue from ``len(existing)`` so that rules from
    several sources share one strictly increasing numbering.  Returns a new
    list; *existing* is not modified.
    """
    rules = list(existing)
    source = SourceText(css_text)
    tokens = tinycss2.parse_component_value_list(source.text)
    bodies = _block_bodies(source, tokens)

    for item in tinycss2.parse_stylesheet(
        tokens, skip_comments=True, skip_whitespace=True
    ):
        if item.type == "error":
            logger.debug("Skipping invalid CSS: %s", item.message)
            continue
        if item.type == "at-rule":
            logger.debug("Skipping @%s rule", item.lower_at_keyword)
            continue
        if item.type != "qualified-rule":
            continue

        declarations = parse_declarations(bodies.get(id(item.content), ""))
        if not declarations:
            continue
        for selector in split_selectors(item.prelude):
            rules.append(StyleRule.create(selector, declarations, len(rules)))
    return rules
