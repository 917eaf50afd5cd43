import logging
from typing import Dict, List, Optional

from tree_sitter import Node

from js_tree_sitter.ast_walker import ASTWalker
from js_tree_sitter.js_patterns import JSPatterns
from js_tree_sitter.models import Token
from js_tree_sitter.token_utils import is_comma_token, is_padding_between_tokens

from ..exceptions import ConfigError
from ..models import Fix, InternalIssue
from ..padding import PaddingType
from .base import BaseRule, RuleContext

logger = logging.getLogger(__name__)

FIRST = "first"
NORMAL = "normal"
LAST = "last"


class ObjectPaddingRule(BaseRule):
    """Requires or forbids blank lines around the properties of object literals"""

    def __init__(self, policy: str = "never"):
        try:
            self.policy = PaddingType(policy)
        except ValueError:
            raise ConfigError(f"Object padding must be 'always' or 'never', got {policy!r}") from None
        if self.policy is PaddingType.ANY:
            raise ConfigError("Object padding must be 'always' or 'never', got 'any'")

    @property
    def rule_id(self) -> str:
        return "padding-lines/objects"

    @property
    def name(self) -> str:
        return "objects"

    @property
    def description(self) -> str:
        return "Control padding lines between object properties"

    @property
    def messages(self) -> Dict[str, str]:
        return {
            "expectedPropertyPadding": "Expected blank line between object props.",
            "unexpectedPropertyPadding": "Unexpected blank line between object props.",
        }

    def check(self, context: RuleContext) -> list[InternalIssue]:
        issues = []
        for node in ASTWalker.find_all_by_type(context.source_code.root, "object"):
            issues.extend(self._check_object(context, node))
        logger.debug("%s: %d issue(s)", self.rule_id, len(issues))
        return issues

    def _check_object(self, context: RuleContext, node: Node) -> List[InternalIssue]:
        properties = JSPatterns.get_object_properties(node)
        if not properties:
            return []
        source_code = context.source_code
        issues = []

        first_token = source_code.get_first_token(properties[0])
        before_first = source_code.get_token_before(first_token) if first_token else None
        issues.append(self._report(context, before_first, first_token, properties[0], FIRST))

        for current, following in zip(properties, properties[1:]):
            last_token = source_code.get_last_token(current)
            next_first = source_code.get_first_token(following)
            issues.append(self._report(context, last_token, next_first, following, NORMAL))

        last_token = source_code.get_last_token(properties[-1])
        after_last = source_code.get_token_after(last_token) if last_token else None
        issues.append(self._report(context, last_token, after_last, properties[-1], LAST))

        return [issue for issue in issues if issue is not None]

    def _report(
        self, context: RuleContext, left: Optional[Token], right: Optional[Token], node: Node, position: str
    ) -> Optional[InternalIssue]:
        if left is None or right is None:
            return None
        is_padded = is_padding_between_tokens(context.source_code, left, right)
        if is_padded == (self.policy is PaddingType.ALWAYS):
            return None
        if is_padded:
            return self._create_issue(
                context, node, "unexpectedPropertyPadding", self._remove_padding_fix(context, left, right, position)
            )
        return self._create_issue(context, node, "expectedPropertyPadding", self._add_padding_fix(context, left))

    def _remove_padding_fix(self, context: RuleContext, left: Token, right: Token, position: str) -> Optional[Fix]:
        """Collapse everything between the tokens to one line break.

        The separating comma is kept between properties and the indentation
        of `right` is preserved. Gaps holding comments are left alone.
        """
        source_code = context.source_code
        between = source_code.get_tokens_between(left, right, include_comments=True)
        if any(token.is_comment for token in between):
            return None
        separator = ""
        if position == NORMAL or any(is_comma_token(token) for token in between):
            separator = ","
        text = separator + "\n" + source_code.get_line_indent(right)
        return Fix(left.end_byte, right.start_byte, text)

    def _add_padding_fix(self, context: RuleContext, left: Token) -> Fix:
        token_after = context.source_code.get_token_after(left)
        anchor = token_after if is_comma_token(token_after) else left
        return Fix(anchor.end_byte, anchor.end_byte, "\n")
