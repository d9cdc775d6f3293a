"""Declaration model: a single CSS property."""

from __future__ import annotations

from dataclasses import dataclass

from css_inliner.model.specificity import Specificity


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair, optionally ``!important``.

    ``specificity`` is the specificity of the rule the declaration came from.
    It is set for every stylesheet-derived declaration and ``None`` for
    declarations read from an element's own ``style`` attribute.
    """

    name: str
    value: str
    important: bool = False
    specificity: Specificity | None = None

    def __post_init__(self) -> None:
        name = self.name.strip().lower()
        if not name:
            raise ValueError("Declaration name must be a non-empty string")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "value", self.value.strip())

    @property
    def is_inline(self) -> bool:
        return self.specificity is None

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.name}: {self.value}{suffix};"
