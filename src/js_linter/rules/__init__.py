from .base import BaseRule, RuleContext
from .object_padding import ObjectPaddingRule
from .statement_padding import ScopeTracker, StatementPaddingRule

__all__ = [
    "BaseRule",
    "RuleContext",
    "ObjectPaddingRule",
    "ScopeTracker",
    "StatementPaddingRule",
]
