"""Per-element accumulation of winning declarations."""

from __future__ import annotations

import logging
from typing import Iterator

from css_inliner.cascade.merger import merge
from css_inliner.model import Declaration, StyleRule

logger = logging.getLogger(__name__)


def collapse_rule(rule: StyleRule) -> dict[str, Declaration]:
    """Reduce a rule body to one declaration per name; the last one wins."""
    collapsed: dict[str, Declaration] = {}
    for decl in rule.declarations:
        collapsed.pop(decl.name, None)
        collapsed[decl.name] = decl
    return collapsed


class ElementAccumulator:
    """Winner maps for one conversion run, keyed by element index.

    A map is only created the first time an element is matched.  Rules must
    be applied in the order produced by
    :func:`css_inliner.cascade.ordering.order_rules`.
    """

    def __init__(self) -> None:
        self._winners: dict[int, dict[str, Declaration]] = {}

    def apply(self, element: int, rule: StyleRule) -> None:
        """Fold every declaration of *rule* into the winners of *element*."""
        winners = self._winners.setdefault(element, {})
        for name, candidate in collapse_rule(rule).items():
            existing = winners.get(name)
            winner = merge(existing, candidate)
            if winner is not existing:
                # An overruled property moves to the end of the map.
                winners.pop(name, None)
                winners[name] = winner

    def winners(self, element: int) -> dict[str, Declaration]:
        """Return a copy of the winners for *element* (empty if never matched)."""
        return dict(self._winners.get(element, {}))

    def __contains__(self, element: int) -> bool:
        return element in self._winners

    def __len__(self) -> int:
        return len(self._winners)

    def __iter__(self) -> Iterator[tuple[int, dict[str, Declaration]]]:
        """Yield ``(element, winners)`` pairs in element order."""
        for element in sorted(self._winners):
            yield element, dict(self._winners[element])
