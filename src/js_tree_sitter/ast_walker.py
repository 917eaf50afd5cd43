from typing import Callable, List, Optional

from tree_sitter import Node

from .node_types import COMMENT_TYPES

Visitor = Callable[[Node], None]


class ASTWalker:
    """Traversal and lookup helpers over the JavaScript syntax tree"""

    @staticmethod
    def walk(node: Node, callback: Visitor):
        """Call `callback` on `node` and every descendant in document order"""
        stack = [node]
        while stack:
            current = stack.pop()
            callback(current)
            stack.extend(reversed(current.children))

    @staticmethod
    def traverse(node: Node, enter: Visitor, leave: Optional[Visitor] = None):
        """Depth-first traversal firing `enter` before and `leave` after the children"""
        stack = [(node, False)]
        while stack:
            current, exited = stack.pop()
            if exited:
                leave(current)
                continue
            enter(current)
            if leave is not None:
                stack.append((current, True))
            stack.extend((child, False) for child in reversed(current.children))

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        return next((c for c in node.children if c.type == type_name), None)

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Descendants of `node` (itself included) with the given type, in document order"""
        found: List[Node] = []

        def collect(current: Node):
            if current.type == type_name:
                found.append(current)

        ASTWalker.walk(node, collect)
        return found

    @staticmethod
    def named_children(node: Node) -> List[Node]:
        """Named children without comments"""
        return [c for c in node.named_children if c.type not in COMMENT_TYPES]
