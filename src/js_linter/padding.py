"""Padding types, rule resolution and blank-line detection between two statements."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from tree_sitter import Node

from js_tree_sitter.models import Token
from js_tree_sitter.source_code import SourceCode
from js_tree_sitter.token_utils import (
    is_semicolon_token,
    is_token_on_same_line,
    line_delta,
)

from .models import Fix
from .statement_types import Selector, match

logger = logging.getLogger(__name__)

LT = r"(?:\r\n|[\r\n\u2028\u2029])"
PADDING_LINE_SEQUENCE = re.compile(rf"^(\s*?{LT})\s*{LT}(\s*;?)\Z")

PaddingLine = Tuple[Token, Token]


class PaddingType(str, Enum):
    ALWAYS = "always"
    NEVER = "never"
    ANY = "any"


@dataclass(frozen=True)
class Violation:
    message_id: str
    node: Node
    fix: Optional[Fix] = None


def get_padding_type(configure_list: Sequence, prev_node: Node, next_node: Node, source_code: SourceCode) -> PaddingType:
    """Padding type of the last configured rule matching the pair, `any` if none does.

    `configure_list` items need `prev`, `next` and `blank_line` attributes.
    """
    for configure in reversed(configure_list):
        if match(prev_node, configure.prev, source_code) and match(next_node, configure.next, source_code):
            padding_type = PaddingType(configure.blank_line)
            logger.debug("%s -> %s resolved to %s", prev_node.type, next_node.type, padding_type.value)
            return padding_type
    return PaddingType.ANY


def get_actual_last_token(source_code: SourceCode, node: Node) -> Token:
    """Last token of `node`, ignoring a semicolon-less style semicolon.

    In

        foo()
        ;[1, 2, 3].forEach(bar)

    the `;` belongs to the first statement but guards the second one, so the
    closing parenthesis is the real end of `foo()`.
    """
    semi_token = source_code.get_last_token(node)
    prev_token = source_code.get_token_before(semi_token)
    next_token = source_code.get_token_after(semi_token)
    is_semicolon_less_style = (
        prev_token is not None
        and next_token is not None
        and prev_token.start_byte >= source_code.get_start_byte(node)
        and is_semicolon_token(semi_token)
        and semi_token.start_point[0] != prev_token.end_point[0]
        and semi_token.end_point[0] == next_token.start_point[0]
    )
    if is_semicolon_less_style:
        return prev_token
    return semi_token


def get_padding_line_sequences(source_code: SourceCode, prev_node: Node, next_node: Node) -> List[PaddingLine]:
    """Token pairs enclosing blank lines between two statements.

    Comments split the blank region, so `foo()\\n\\n// c\\n\\nbar()` yields two pairs.
    """
    pairs: List[PaddingLine] = []
    prev_token = get_actual_last_token(source_code, prev_node)
    if source_code.get_start_line(next_node) - prev_token.end_point[0] < 2:
        return pairs
    next_start = source_code.get_start_byte(next_node)
    while prev_token.start_byte < next_start:
        token = source_code.get_token_after(prev_token, include_comments=True)
        if token is None:
            break
        if line_delta(prev_token, token) >= 2:
            pairs.append((prev_token, token))
        prev_token = token
    return pairs


def _replacer_to_remove_padding_lines(m: re.Match) -> str:
    # Trailing spaces of the first line plus the indentation of the last one.
    return m.group(1) + m.group(2)


def verify_for_any(
    source_code: SourceCode, prev_node: Node, next_node: Node, padding_lines: List[PaddingLine]
) -> Optional[Violation]:
    return None


def verify_for_never(
    source_code: SourceCode, prev_node: Node, next_node: Node, padding_lines: List[PaddingLine]
) -> Optional[Violation]:
    """Report blank lines between the statements.

    Only a single uninterrupted blank region is fixed; when comments split
    the blank lines into several regions the report carries no fix.
    """
    if not padding_lines:
        return None
    fix = None
    if len(padding_lines) == 1:
        prev_token, next_token = padding_lines[0]
        start, end = prev_token.end_byte, next_token.start_byte
        text = PADDING_LINE_SEQUENCE.sub(_replacer_to_remove_padding_lines, source_code.get_text_range(start, end))
        fix = Fix(start, end, text)
    return Violation("unexpectedBlankLine", next_node, fix)


def verify_for_always(
    source_code: SourceCode, prev_node: Node, next_node: Node, padding_lines: List[PaddingLine]
) -> Optional[Violation]:
    """Report a missing blank line between the statements.

    The fix goes after any trailing comments of the previous statement:

        foo(); // trailing comment.
        // comment.
        bar();

    becomes

        foo(); // trailing comment.

        // comment.
        bar();
    """
    if padding_lines:
        return None
    prev_token = get_actual_last_token(source_code, prev_node)
    next_start = source_code.get_start_byte(next_node)
    next_line = source_code.get_start_line(next_node)
    for token in source_code.iter_tokens_between(prev_token, next_node, include_comments=True):
        if token.start_byte >= next_start:
            break
        if is_token_on_same_line(prev_token, token):
            prev_token = token
            continue
        next_line = token.start_point[0]
        break
    insert_text = "\n"
    if prev_token.end_point[0] == next_line:
        insert_text += "\n"
    return Violation("expectedBlankLine", next_node, Fix(prev_token.end_byte, prev_token.end_byte, insert_text))


Verifier = Callable[[SourceCode, Node, Node, List[PaddingLine]], Optional[Violation]]

VERIFIERS: Dict[PaddingType, Verifier] = {
    PaddingType.ALWAYS: verify_for_always,
    PaddingType.ANY: verify_for_any,
    PaddingType.NEVER: verify_for_never,
}


def selector_names(selector: Selector) -> List[str]:
    return [selector] if isinstance(selector, str) else list(selector)
