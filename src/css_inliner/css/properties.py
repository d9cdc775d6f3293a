"""Split CSS declaration text into Declarations and format them back."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

import tinycss2

from css_inliner.css.source import SourceText
from css_inliner.model import Declaration, Specificity

__all__ = ["parse_declarations", "parse_inline", "format_declaration", "serialize"]

logger = logging.getLogger(__name__)


def _segments(source: SourceText, tokens: list) -> Iterator[tuple[list, int]]:
    """Yield ``(tokens, end_offset)`` for each top-level ``;``-separated segment."""
    segment: list = []
    for token in tokens:
        if token.type == "literal" and token.value == ";":
            yield segment, source.offset(token)
            segment = []
        else:
            segment.append(token)
    yield segment, len(source)


def _literal(tokens: list, value: str, last: bool = False):
    found = None
    for token in tokens:
        if token.type == "literal" and token.value == value:
            found = token
            if not last:
                break
    return found


def parse_declarations(
    text: str, specificity: Specificity | None = None
) -> list[Declaration]:
    """Parse a declaration list in textual order.

    Values keep their source text (quotes, escapes and comments included);
    only the ``!important`` marker and surrounding whitespace are removed.
    Repeated names are all returned; deciding between them is the caller's
    job.  Declarations with an empty value, nested at-rules and parse errors
    are dropped.
    """
    source = SourceText(text)
    tokens = tinycss2.parse_component_value_list(source.text)

    declarations: list[Declaration] = []
    for segment, end in _segments(source, tokens):
        item = tinycss2.parse_one_declaration(segment)
        if item.type == "error":
            if item.kind != "empty":
                logger.debug("Skipping invalid declaration: %s", item.message)
            continue

        colon = _literal(segment, ":")
        if item.important:
            end = source.offset(_literal(segment, "!", last=True))
        value = source.slice(source.offset(colon) + 1, end).strip()
        if not value:
            continue
        declarations.append(
            Declaration(
                name=item.lower_name,
                value=value,
                important=item.important,
                specificity=specificity,
            )
        )
    return declarations


def parse_inline(text: str | None) -> list[Declaration]:
    """Parse the contents of a ``style`` attribute.

    A name given twice keeps the position of its first occurrence and the
    value of its last one.
    """
    if not text or not text.strip():
        return []
    by_name: dict[str, Declaration] = {}
    for decl in parse_declarations(text):
        by_name[decl.name] = decl
    return list(by_name.values())


def format_declaration(declaration: Declaration) -> str:
    """Format one declaration, terminator included: ``color: red;``."""
    return str(declaration)


def serialize(declarations: Iterable[Declaration]) -> str:
    """Join formatted declarations into a ``style`` attribute value."""
    return " ".join(format_declaration(d) for d in declarations)
