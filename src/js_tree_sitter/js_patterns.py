"""JavaScript-specific AST pattern recognition."""

from typing import List, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import FUNCTION_TYPES, VARIABLE_DECLARATION_TYPES


class JSPatterns:
    """Recognize JavaScript shapes in the tree-sitter AST."""

    @staticmethod
    def is_function(node: Optional[Node], include_methods: bool = False) -> bool:
        """Check if a node is a function declaration, expression or arrow.

        Method definitions carry their body directly in tree-sitter, so they
        count as functions when `include_methods` is set.
        """
        if node is None:
            return False
        if include_methods and node.type == "method_definition":
            return True
        return node.type in FUNCTION_TYPES

    @staticmethod
    def skip_parentheses(node: Optional[Node]) -> Optional[Node]:
        """Unwrap any number of parenthesized_expression layers"""
        while node is not None and node.type == "parenthesized_expression":
            children = ASTWalker.named_children(node)
            node = children[0] if children else None
        return node

    @staticmethod
    def get_expression(statement: Node) -> Optional[Node]:
        """The expression of an expression_statement"""
        if statement.type != "expression_statement":
            return None
        children = ASTWalker.named_children(statement)
        return children[0] if children else None

    @staticmethod
    def get_first_declarator(declaration: Node) -> Optional[Node]:
        if declaration.type not in VARIABLE_DECLARATION_TYPES:
            return None
        return ASTWalker.get_child_of_type(declaration, "variable_declarator")

    @staticmethod
    def get_declarator_init(declaration: Node) -> Optional[Node]:
        """Initializer of the first declarator, or None for `let a` and the like"""
        declarator = JSPatterns.get_first_declarator(declaration)
        if declarator is None:
            return None
        return declarator.child_by_field_name("value")

    @staticmethod
    def unwrap_labels(node: Node) -> Node:
        """Follow labeled statements down to the statement they label"""
        while node.type == "labeled_statement":
            body = node.child_by_field_name("body")
            if body is None:
                children = ASTWalker.named_children(node)
                if len(children) < 2:
                    break
                body = children[-1]
            node = body
        return node

    @staticmethod
    def get_statement_siblings(node: Node) -> List[Node]:
        """Statements sharing the parent of `node`, in source order"""
        if node.parent is None:
            return []
        return [c for c in ASTWalker.named_children(node.parent) if c.type != "hash_bang_line"]

    @staticmethod
    def get_object_properties(node: Node) -> List[Node]:
        """Properties of an object literal (pairs, shorthands, methods, spreads)"""
        if node.type != "object":
            return []
        return ASTWalker.named_children(node)
