"""css_inliner: turn stylesheet rules into inline style attributes."""
from __future__ import annotations

__version__ = "0.1.0"

from css_inliner.config import InlinerConfig
from css_inliner.errors import (
    CascadeContractError,
    DocumentError,
    InlinerError,
    StylesheetLoadError,
)
from css_inliner.inliner import CssToInlineStyles, convert
from css_inliner.model import Declaration, Specificity, StyleRule

__all__ = [
    "__version__",
    "CascadeContractError",
    "CssToInlineStyles",
    "Declaration",
    "DocumentError",
    "InlinerConfig",
    "InlinerError",
    "Specificity",
    "StyleRule",
    "StylesheetLoadError",
    "convert",
]
