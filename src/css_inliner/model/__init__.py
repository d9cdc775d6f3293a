from css_inliner.model.specificity import Specificity
from css_inliner.model.declaration import Declaration
from css_inliner.model.rule import StyleRule

__all__ = ["Specificity", "Declaration", "StyleRule"]
