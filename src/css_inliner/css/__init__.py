from css_inliner.css.parser import parse_stylesheet, split_selectors
from css_inliner.css.properties import (
    format_declaration,
    parse_declarations,
    parse_inline,
    serialize,
)
from css_inliner.css.source import SourceText

__all__ = [
    "parse_stylesheet",
    "split_selectors",
    "format_declaration",
    "parse_declarations",
    "parse_inline",
    "serialize",
    "SourceText",
]
