from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tree_sitter import Node, Tree


@dataclass(frozen=True)
class Token:
    """A lexical token or comment taken from the leaves of the syntax tree"""

    type: str
    value: str
    start_byte: int
    end_byte: int
    start_point: Tuple[int, int]
    end_point: Tuple[int, int]
    is_comment: bool = False
    node: Optional[Node] = field(default=None, compare=False, repr=False)

    @property
    def line(self) -> int:
        """1-based line the token starts on"""
        return self.start_point[0] + 1


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: bytes
    errors: List[str] = field(default_factory=list)

    @property
    def root_node(self) -> Node:
        return self.tree.root_node
