"""Final merge of stylesheet winners with an element's inline declarations."""

from __future__ import annotations

from typing import Iterable

from css_inliner.model import Declaration


def reconcile(
    inline: Iterable[Declaration], stylesheet: Iterable[Declaration]
) -> list[Declaration]:
    """Combine stylesheet-derived and inline declarations.

    Any property the element declares inline keeps its inline declaration,
    whatever the importance or specificity of the stylesheet one.  Surviving
    stylesheet declarations come first, followed by the inline declarations
    in their original order.
    """
    inline = list(inline)
    inline_names = {d.name for d in inline}
    survivors = [d for d in stylesheet if d.name not in inline_names]
    return survivors + inline
