"""Rule ordering: the sequence in which matched rules are folded."""

from __future__ import annotations

from typing import Iterable

from css_inliner.model import StyleRule


def order_rules(rules: Iterable[StyleRule]) -> list[StyleRule]:
    """Sort rules ascending by ``(specificity, sequence)``.

    Sequence numbers are unique, so no two rules compare equal and the result
    does not rely on sort stability.
    """
    return sorted(rules, key=lambda r: r.sort_key)
