"""StyleRule model: one selector with its declarations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from css_inliner.model.declaration import Declaration
from css_inliner.model.specificity import Specificity


@dataclass(frozen=True)
class StyleRule:
    """A stylesheet rule reduced to a single selector.

    Attributes:
        selector: The selector text, e.g. ``"div.note > p"``.
        declarations: Declarations in the order they appear in the rule body.
        sequence: Position of the rule in the concatenated stylesheet input.
            Unique per conversion run.
        specificity: Specificity computed from ``selector``.  Every
            declaration of the rule carries this same value.
    """

    selector: str
    declarations: tuple[Declaration, ...]
    sequence: int
    specificity: Specificity

    def __post_init__(self) -> None:
        for decl in self.declarations:
            if decl.specificity != self.specificity:
                raise ValueError(
                    f"Declaration {decl.name!r} of rule {self.selector!r} has "
                    f"specificity {decl.specificity}, expected {self.specificity}"
                )

    @classmethod
    def create(
        cls, selector: str, declarations: Iterable[Declaration], sequence: int
    ) -> StyleRule:
        """Build a rule, stamping the selector's specificity onto each declaration."""
        specificity = Specificity.from_selector(selector)
        stamped = tuple(replace(d, specificity=specificity) for d in declarations)
        return cls(
            selector=selector,
            declarations=stamped,
            sequence=sequence,
            specificity=specificity,
        )

    @property
    def sort_key(self) -> tuple[Specificity, int]:
        return (self.specificity, self.sequence)
