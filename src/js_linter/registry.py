from typing import Iterable, Protocol

from .config import PaddingLinesConfig
from .models import InternalIssue
from .rules.base import RuleContext


class LintRule(Protocol):
    """Protocol for a linting rule"""

    rule_id: str

    def check(self, context: RuleContext) -> list[InternalIssue]: ...


class RuleRegistry:
    """Registry for managing and loading padding rules"""

    def __init__(self, config: PaddingLinesConfig | None = None):
        self.config = config or PaddingLinesConfig()
        self._rules: list[LintRule] = []
        self._load_builtin_rules()

    def register(self, rule: LintRule):
        self._rules.append(rule)

    def get_all_rules(self) -> list[LintRule]:
        return list(self._rules)

    def get_rule(self, rule_id: str) -> LintRule | None:
        return next((r for r in self._rules if r.rule_id == rule_id), None)

    def get_enabled_rules(self, select: Iterable[str] | None = None, ignore: Iterable[str] | None = None) -> list[LintRule]:
        """Rules whose id starts with a selected prefix and with no ignored prefix"""
        select = list(self.config.select if select is None else select)
        ignore = list(self.config.ignore if ignore is None else ignore)
        return [
            r
            for r in self._rules
            if any(r.rule_id.startswith(s) for s in select) and not any(r.rule_id.startswith(i) for i in ignore)
        ]

    def _load_builtin_rules(self):
        from .rules.object_padding import ObjectPaddingRule
        from .rules.statement_padding import StatementPaddingRule

        self.register(StatementPaddingRule(self.config.statements))
        self.register(ObjectPaddingRule(self.config.objects))
