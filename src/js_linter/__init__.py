from .autofix import AutoFixEngine
from .config import PaddingLinesConfig, PaddingRuleConfig
from .engine import LinterEngine
from .exceptions import ConfigError, PaddingLinesError
from .models import Fix, FixResult, InternalIssue, Severity
from .padding import PaddingType
from .registry import RuleRegistry
from .rules import ObjectPaddingRule, StatementPaddingRule
from .statement_types import STATEMENT_TYPES, classify, match

__all__ = [
    "AutoFixEngine",
    "ConfigError",
    "Fix",
    "FixResult",
    "InternalIssue",
    "LinterEngine",
    "ObjectPaddingRule",
    "PaddingLinesConfig",
    "PaddingLinesError",
    "PaddingRuleConfig",
    "PaddingType",
    "RuleRegistry",
    "Severity",
    "STATEMENT_TYPES",
    "StatementPaddingRule",
    "classify",
    "match",
]
