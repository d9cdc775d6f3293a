"""Selector specificity: the cascade weight of a selector."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import cssselect

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Specificity:
    """Cascade weight of a selector as an ``(a, b, c)`` triple.

    Attributes:
        ids: Number of id selectors.
        classes: Number of class, attribute and pseudo-class selectors.
        types: Number of type selectors and pseudo-elements.

    Instances compare lexicographically over the triple, so the built-in
    comparison operators and ``sorted`` work directly.  Neither
    ``!important`` nor source order is part of the value.
    """

    ids: int = 0
    classes: int = 0
    types: int = 0

    def __post_init__(self) -> None:
        if min(self.ids, self.classes, self.types) < 0:
            raise ValueError(f"Specificity counts must be non-negative: {self}")

    @classmethod
    def from_selector(cls, selector: str) -> Specificity:
        """Compute the specificity of a single selector string.

        Selectors that cannot be parsed get ``(0, 0, 0)``; they never match
        anything, so their weight has no effect on the cascade.
        """
        try:
            parsed = cssselect.parse(selector)
        except cssselect.SelectorError as exc:
            logger.debug("Cannot compute specificity of %r: %s", selector, exc)
            return cls()
        if not parsed:
            return cls()
        return cls(*max(s.specificity() for s in parsed))

    def compare_to(self, other: Specificity) -> int:
        """Return -1, 0 or 1 as this specificity is lower, equal or higher."""
        mine, theirs = self.as_tuple(), other.as_tuple()
        return (mine > theirs) - (mine < theirs)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.ids, self.classes, self.types)

    def __str__(self) -> str:
        return f"{self.ids},{self.classes},{self.types}"
