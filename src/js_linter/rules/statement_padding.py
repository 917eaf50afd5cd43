import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from tree_sitter import Node

from js_tree_sitter.ast_walker import ASTWalker
from js_tree_sitter.node_types import (
    SCOPE_TYPES,
    STATEMENT_LIST_PARENTS,
    STATEMENT_TYPES,
    SWITCH_CASE_TYPES,
)

from ..config import PaddingRuleConfig, load_statement_rules
from ..models import InternalIssue
from ..padding import VERIFIERS, get_padding_line_sequences, get_padding_type
from .base import BaseRule, RuleContext

logger = logging.getLogger(__name__)


@dataclass
class Scope:
    """Last statement seen at one nesting level"""

    prev_node: Optional[Node] = None


class ScopeTracker:
    """Stack of scopes along the path from the program root to the current node"""

    def __init__(self):
        self._stack: List[Scope] = []

    @property
    def current(self) -> Scope:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def enter(self):
        self._stack.append(Scope())
        logger.debug("Scope push, depth %d", len(self._stack))

    def exit(self):
        if not self._stack:
            raise RuntimeError("Scope exit without a matching enter")
        self._stack.pop()
        logger.debug("Scope pop, depth %d", len(self._stack))


class StatementPaddingPass:
    """One traversal of one file by the statement padding rule"""

    def __init__(self, rule: "StatementPaddingRule", context: RuleContext):
        self.rule = rule
        self.context = context
        self.scopes = ScopeTracker()
        self.issues: List[InternalIssue] = []

    def enter(self, node: Node):
        # A statement is checked against its previous sibling before it opens its own scope.
        if node.type in STATEMENT_TYPES or node.type in SWITCH_CASE_TYPES:
            self.verify(node)
        if node.type in SCOPE_TYPES:
            self.scopes.enter()

    def exit(self, node: Node):
        if node.type in SCOPE_TYPES:
            self.scopes.exit()

    def verify(self, node: Node):
        parent = node.parent
        if parent is None or parent.type not in STATEMENT_LIST_PARENTS:
            return
        scope = self.scopes.current
        prev_node = scope.prev_node
        if prev_node is not None:
            source_code = self.context.source_code
            padding_type = get_padding_type(self.rule.configure_list, prev_node, node, source_code)
            padding_lines = get_padding_line_sequences(source_code, prev_node, node)
            violation = VERIFIERS[padding_type](source_code, prev_node, node, padding_lines)
            if violation:
                self.issues.append(
                    self.rule._create_issue(self.context, violation.node, violation.message_id, violation.fix)
                )
        scope.prev_node = node


class StatementPaddingRule(BaseRule):
    """Requires or forbids blank lines between configured pairs of statements"""

    def __init__(self, configure_list: Iterable[Union[PaddingRuleConfig, dict]] = ()):
        self.configure_list = load_statement_rules(configure_list)

    @property
    def rule_id(self) -> str:
        return "padding-lines/statements"

    @property
    def name(self) -> str:
        return "statements"

    @property
    def description(self) -> str:
        return "Control padding lines between statements"

    @property
    def messages(self) -> Dict[str, str]:
        return {
            "expectedBlankLine": "Expected blank line above.",
            "unexpectedBlankLine": "Unexpected blank line above.",
        }

    def check(self, context: RuleContext) -> list[InternalIssue]:
        if not self.configure_list:
            return []
        padding_pass = StatementPaddingPass(self, context)
        ASTWalker.traverse(context.source_code.root, padding_pass.enter, padding_pass.exit)
        logger.debug("%s: %d issue(s)", self.rule_id, len(padding_pass.issues))
        return padding_pass.issues
