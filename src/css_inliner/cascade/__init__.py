from css_inliner.cascade.accumulator import ElementAccumulator, collapse_rule
from css_inliner.cascade.merger import merge
from css_inliner.cascade.ordering import order_rules
from css_inliner.cascade.reconciler import reconcile

__all__ = [
    "ElementAccumulator",
    "collapse_rule",
    "merge",
    "order_rules",
    "reconcile",
]
