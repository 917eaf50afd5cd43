"""Token-level view of a parsed JavaScript file.

tree-sitter exposes a concrete syntax tree, not a token list. `SourceCode`
flattens the leaves of the tree into an ordered token stream (comments
included, flagged) and answers positional queries over it: first/last token
of a node, the token before/after a node or token, and the tokens that lie
between two positions. All offsets are byte offsets into the UTF-8 source.
"""

from bisect import bisect_left
from typing import Callable, Iterator, List, Optional, Union

from tree_sitter import Node

from .models import ParseResult, Token
from .node_types import ATOMIC_TOKEN_TYPES, COMMENT_TYPES

TokenFilter = Callable[[Token], bool]
Located = Union[Node, Token]


class SourceCode:
    """Token and text access for one parsed file"""

    def __init__(self, parse_result: ParseResult):
        self.parse_result = parse_result
        self.source = parse_result.source
        self.root = parse_result.root_node
        self._all = self._tokenize(self.root)
        self._all_starts = [t.start_byte for t in self._all]
        self._tokens = [t for t in self._all if not t.is_comment]
        self._token_starts = [t.start_byte for t in self._tokens]

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    @property
    def comments(self) -> List[Token]:
        return [t for t in self._all if t.is_comment]

    def _tokenize(self, root: Node) -> List[Token]:
        tokens = []
        stack = [root]
        while stack:
            node = stack.pop()
            is_comment = node.type in COMMENT_TYPES
            if is_comment or node.type in ATOMIC_TOKEN_TYPES or node.child_count == 0:
                # Automatic semicolons and missing nodes have no width.
                if node.end_byte > node.start_byte and not node.is_missing:
                    tokens.append(self._make_token(node, is_comment))
                continue
            stack.extend(reversed(node.children))
        tokens.sort(key=lambda t: t.start_byte)
        return tokens

    def _make_token(self, node: Node, is_comment: bool) -> Token:
        return Token(
            type=node.type,
            value=self.source[node.start_byte : node.end_byte].decode("utf-8"),
            start_byte=node.start_byte,
            end_byte=node.end_byte,
            start_point=tuple(node.start_point),
            end_point=tuple(node.end_point),
            is_comment=is_comment,
            node=node,
        )

    def _stream(self, include_comments: bool):
        if include_comments:
            return self._all, self._all_starts
        return self._tokens, self._token_starts

    # Node-relative queries

    def get_tokens(self, node: Located, include_comments: bool = False) -> List[Token]:
        tokens, starts = self._stream(include_comments)
        result = []
        for i in range(bisect_left(starts, node.start_byte), len(tokens)):
            if tokens[i].start_byte >= node.end_byte:
                break
            result.append(tokens[i])
        return result

    def get_first_token(
        self, node: Located, filter: Optional[TokenFilter] = None, include_comments: bool = False
    ) -> Optional[Token]:
        for token in self.get_tokens(node, include_comments):
            if filter is None or filter(token):
                return token
        return None

    def get_last_token(
        self, node: Located, filter: Optional[TokenFilter] = None, include_comments: bool = False
    ) -> Optional[Token]:
        for token in reversed(self.get_tokens(node, include_comments)):
            if filter is None or filter(token):
                return token
        return None

    def get_token_before(self, node: Located, include_comments: bool = False) -> Optional[Token]:
        tokens, starts = self._stream(include_comments)
        i = bisect_left(starts, node.start_byte) - 1
        return tokens[i] if i >= 0 else None

    def get_token_after(self, node: Located, include_comments: bool = False) -> Optional[Token]:
        tokens, starts = self._stream(include_comments)
        i = bisect_left(starts, node.end_byte)
        return tokens[i] if i < len(tokens) else None

    def iter_tokens_between(
        self, left: Located, right: Located, include_comments: bool = False
    ) -> Iterator[Token]:
        """Tokens starting after `left` ends and ending before `right` starts"""
        tokens, starts = self._stream(include_comments)
        for i in range(bisect_left(starts, left.end_byte), len(tokens)):
            if tokens[i].end_byte > right.start_byte:
                break
            yield tokens[i]

    def get_tokens_between(
        self, left: Located, right: Located, include_comments: bool = False
    ) -> List[Token]:
        return list(self.iter_tokens_between(left, right, include_comments))

    def get_first_token_between(
        self,
        left: Located,
        right: Located,
        filter: Optional[TokenFilter] = None,
        include_comments: bool = False,
    ) -> Optional[Token]:
        for token in self.iter_tokens_between(left, right, include_comments):
            if filter is None or filter(token):
                return token
        return None

    def get_comments_before(self, token: Located) -> List[Token]:
        """The run of comments directly preceding `token`, in source order"""
        i = bisect_left(self._all_starts, token.start_byte) - 1
        comments = []
        while i >= 0 and self._all[i].is_comment:
            comments.append(self._all[i])
            i -= 1
        comments.reverse()
        return comments

    def get_node_by_range_index(self, index: int) -> Optional[Node]:
        """Deepest named node whose range contains the byte `index`"""
        if not self.root.start_byte <= index < self.root.end_byte:
            return None
        node = self.root
        while True:
            for child in node.named_children:
                if child.start_byte <= index < child.end_byte:
                    node = child
                    break
            else:
                return node

    # Positions measured through tokens so grammar extras do not widen a node

    def get_start_byte(self, node: Located) -> int:
        if isinstance(node, Token):
            return node.start_byte
        first = self.get_first_token(node)
        return first.start_byte if first else node.start_byte

    def get_start_line(self, node: Located) -> int:
        """0-based row of the first token of `node`"""
        if isinstance(node, Token):
            return node.start_point[0]
        first = self.get_first_token(node)
        return first.start_point[0] if first else node.start_point[0]

    def get_end_line(self, node: Located) -> int:
        """0-based row of the last token of `node`"""
        if isinstance(node, Token):
            return node.end_point[0]
        last = self.get_last_token(node)
        return last.end_point[0] if last else node.end_point[0]

    def get_start_column(self, node: Located) -> int:
        if isinstance(node, Token):
            return node.start_point[1]
        first = self.get_first_token(node)
        return first.start_point[1] if first else node.start_point[1]

    # Text

    def get_text(self, node: Located) -> str:
        return self.get_text_range(node.start_byte, node.end_byte)

    def get_text_range(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")

    def get_line_indent(self, token: Located) -> str:
        """Whitespace before `token` on its line, or "" if code precedes it"""
        line_start = self.source.rfind(b"\n", 0, token.start_byte) + 1
        prefix = self.source[line_start : token.start_byte]
        return prefix.decode("utf-8") if prefix.strip() == b"" else ""
