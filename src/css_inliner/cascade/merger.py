"""The override decision between two competing declarations."""

from __future__ import annotations

from css_inliner.errors import CascadeContractError
from css_inliner.model import Declaration


def merge(existing: Declaration | None, candidate: Declaration) -> Declaration:
    """Return the declaration that wins for a property name.

    Decision order:
        1. nothing there yet: *candidate* wins;
        2. only *existing* is important: *existing* wins;
        3. only *candidate* is important: *candidate* wins;
        4. otherwise *candidate* wins when its specificity is greater than
           or equal to the specificity of *existing*.

    Rules are folded in ascending ``(specificity, sequence)`` order, so the
    ``>=`` in step 4 lets a later rule of equal specificity win.

    Raises:
        CascadeContractError: if step 4 is reached with a declaration that
            has no specificity (an inline declaration).
    """
    if existing is None:
        return candidate
    if existing.important and not candidate.important:
        return existing
    if candidate.important and not existing.important:
        return candidate

    if existing.specificity is None or candidate.specificity is None:
        raise CascadeContractError(
            f"Cannot merge {candidate.name!r}: stylesheet declarations always "
            "carry the specificity of their rule"
        )
    if existing.specificity <= candidate.specificity:
        return candidate
    return existing
