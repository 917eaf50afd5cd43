"""Token and line primitives shared by the statement and object padding rules."""

from typing import Optional, Sequence

from tree_sitter import Node

from .models import Token
from .source_code import Located, SourceCode


def is_semicolon_token(token: Optional[Token]) -> bool:
    return token is not None and not token.is_comment and token.type == ";"


def is_not_semicolon_token(token: Optional[Token]) -> bool:
    return not is_semicolon_token(token)


def is_closing_brace_token(token: Optional[Token]) -> bool:
    return token is not None and not token.is_comment and token.type == "}"


def is_comma_token(token: Optional[Token]) -> bool:
    return token is not None and not token.is_comment and token.type == ","


def is_token_on_same_line(left: Located, right: Located) -> bool:
    return left.end_point[0] == right.start_point[0]


def line_delta(left: Located, right: Located) -> int:
    """Number of line breaks between the end of `left` and the start of `right`"""
    return right.start_point[0] - left.end_point[0]


def is_parenthesised(source_code: SourceCode, node: Node) -> bool:
    """Whether `node` is directly wrapped in a pair of parentheses"""
    previous_token = source_code.get_token_before(node)
    next_token = source_code.get_token_after(node)
    return (
        previous_token is not None
        and next_token is not None
        and previous_token.value == "("
        and previous_token.end_byte <= node.start_byte
        and next_token.value == ")"
        and next_token.start_byte >= node.end_byte
    )


def count_comment_lines(first: Located, second: Located, comments: Sequence[Located]) -> int:
    """Lines between `first` and `second` occupied by `comments`.

    Each comment counts every line it spans. A line is counted once when it
    is shared by two adjacent comments, by `first` and the first comment, or
    by the last comment and `second`.
    """
    if not comments:
        return 0
    total = 0
    prev_comment_line = -1
    for comment in comments:
        total += comment.end_point[0] - comment.start_point[0] + 1
        if prev_comment_line == comment.start_point[0]:
            total -= 1
        prev_comment_line = comment.end_point[0]
    if first.end_point[0] == comments[0].start_point[0]:
        total -= 1
    if comments[-1].end_point[0] == second.start_point[0]:
        total -= 1
    return total


def is_padding_between_tokens(source_code: SourceCode, first: Token, second: Token) -> bool:
    """Whether at least one blank line that is not taken by a comment separates the tokens"""
    comments = source_code.get_comments_before(second)
    lines_between = line_delta(first, second) - 1
    return lines_between - count_comment_lines(first, second, comments) >= 1
