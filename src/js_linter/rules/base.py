from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from tree_sitter import Node

from js_tree_sitter.source_code import SourceCode

from ..models import Fix, InternalIssue, Severity


@dataclass
class RuleContext:
    """Everything a rule needs to check one file"""

    source_code: SourceCode
    file_path: Path | None = None


class BaseRule(ABC):
    """Abstract base class for all padding rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'padding-lines/statements')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""
        pass

    @property
    def severity(self) -> Severity:
        return Severity.STYLE

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return True

    @property
    def description(self) -> str:
        return ""

    @property
    @abstractmethod
    def messages(self) -> Dict[str, str]:
        """Message id to message text."""
        pass

    @abstractmethod
    def check(self, context: RuleContext) -> list[InternalIssue]:
        """Run the check and return found issues."""
        pass

    def _create_issue(self, context: RuleContext, node: Node, message_id: str, fix: Fix | None) -> InternalIssue:
        """Helper to create an issue anchored at the first token of `node`."""
        source_code = context.source_code
        return InternalIssue(
            file_path=context.file_path,
            line=source_code.get_start_line(node) + 1,
            column=source_code.get_start_column(node) + 1,
            rule_id=self.rule_id,
            message_id=message_id,
            message=self.messages[message_id],
            severity=self.severity,
            auto_fixable=fix is not None,
            fix=fix,
            context=node.type,
        )
