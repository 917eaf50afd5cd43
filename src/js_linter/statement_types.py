"""Statement categories used by the `prev`/`next` selectors of statement padding rules.

Every category is a predicate `(node, source_code) -> bool`. A statement may
belong to any number of categories at once; `match` unwraps labels and
applies OR semantics for list selectors.
"""

import re
from typing import Callable, Dict, List, Sequence, Union

from tree_sitter import Node

from js_tree_sitter.js_patterns import JSPatterns
from js_tree_sitter.node_types import (
    ASSIGNMENT_TYPES,
    BLOCK_OWNER_TYPES,
    FUNCTION_DECLARATION_TYPES,
    VARIABLE_DECLARATION_TYPES,
)
from js_tree_sitter.source_code import SourceCode
from js_tree_sitter.token_utils import (
    is_closing_brace_token,
    is_not_semicolon_token,
    is_parenthesised,
)

CJS_EXPORT = re.compile(r"^(?:module\s*\.\s*)?exports(?:\s*\.|\s*\[|$)")
CJS_IMPORT = re.compile(r"^require\(")

Tester = Callable[[Node, SourceCode], bool]
Selector = Union[str, Sequence[str]]


def _first_token_value(node: Node, source_code: SourceCode) -> str | None:
    token = source_code.get_first_token(node)
    return token.value if token else None


def is_multiline(node: Node, source_code: SourceCode) -> bool:
    return source_code.get_start_line(node) != source_code.get_end_line(node)


def new_keyword_tester(keyword: str) -> Tester:
    """Matches statements whose first token is `keyword`"""

    def test(node: Node, source_code: SourceCode) -> bool:
        return _first_token_value(node, source_code) == keyword

    return test


def new_singleline_keyword_tester(keyword: str) -> Tester:
    def test(node: Node, source_code: SourceCode) -> bool:
        return not is_multiline(node, source_code) and _first_token_value(node, source_code) == keyword

    return test


def new_multiline_keyword_tester(keyword: str) -> Tester:
    def test(node: Node, source_code: SourceCode) -> bool:
        return is_multiline(node, source_code) and _first_token_value(node, source_code) == keyword

    return test


def new_node_type_tester(*types: str) -> Tester:
    def test(node: Node, source_code: SourceCode) -> bool:
        return node.type in types

    return test


def is_iife_statement(node: Node, source_code: SourceCode | None = None) -> bool:
    """Expression statement calling a function in place, e.g. `(function () {})()` or `!function () {}()`"""
    if node.type != "expression_statement":
        return False
    call = JSPatterns.skip_parentheses(JSPatterns.get_expression(node))
    if call is not None and call.type == "unary_expression":
        call = JSPatterns.skip_parentheses(call.child_by_field_name("argument"))
    if call is None or call.type != "call_expression":
        return False
    callee = JSPatterns.skip_parentheses(call.child_by_field_name("function"))
    return JSPatterns.is_function(callee)


def is_block_like_statement(node: Node, source_code: SourceCode) -> bool:
    """Statement ending with the closing brace of a block or switch"""
    if node.type == "do_statement":
        body = node.child_by_field_name("body")
        if body is not None and body.type == "statement_block":
            return True
    # IIFEs count as block-like.
    if is_iife_statement(node):
        return True
    last_token = source_code.get_last_token(node, is_not_semicolon_token)
    if not is_closing_brace_token(last_token):
        return False
    belonging_node = source_code.get_node_by_range_index(last_token.start_byte)
    return belonging_node is not None and belonging_node.type in BLOCK_OWNER_TYPES


def is_arrow_function(node: Node | None, source_code: SourceCode | None = None) -> bool:
    """Variable declaration whose first declarator is initialized with an arrow function"""
    if node is None or node.type not in VARIABLE_DECLARATION_TYPES:
        return False
    init = JSPatterns.skip_parentheses(JSPatterns.get_declarator_init(node))
    return init is not None and init.type == "arrow_function"


def is_directive(node: Node, source_code: SourceCode) -> bool:
    """Bare string expression statement at the top level of a program or function body"""
    if node.type != "expression_statement":
        return False
    parent = node.parent
    if parent is None:
        return False
    in_body = parent.type == "program" or (
        parent.type == "statement_block" and JSPatterns.is_function(parent.parent, include_methods=True)
    )
    if not in_body:
        return False
    expression = JSPatterns.get_expression(node)
    return (
        expression is not None
        and expression.type == "string"
        and not is_parenthesised(source_code, expression)
    )


def is_directive_prologue(node: Node, source_code: SourceCode) -> bool:
    """A directive preceded only by directives"""
    if not is_directive(node, source_code):
        return False
    for sibling in JSPatterns.get_statement_siblings(node):
        if sibling.start_byte >= node.start_byte:
            break
        if not is_directive(sibling, source_code):
            return False
    return True


def _is_cjs_export(node: Node, source_code: SourceCode) -> bool:
    expression = JSPatterns.skip_parentheses(JSPatterns.get_expression(node))
    if expression is None or expression.type not in ASSIGNMENT_TYPES:
        return False
    left = expression.child_by_field_name("left")
    return left is not None and CJS_EXPORT.match(source_code.get_text(left)) is not None


def _is_cjs_import(node: Node, source_code: SourceCode) -> bool:
    init = JSPatterns.get_declarator_init(node)
    return init is not None and CJS_IMPORT.match(source_code.get_text(init)) is not None


def _new_declaration_tester(keyword: str) -> Tester:
    """Declarations starting with `keyword`, arrow-function declarations excluded"""
    keyword_test = new_keyword_tester(keyword)

    def test(node: Node, source_code: SourceCode) -> bool:
        return keyword_test(node, source_code) and not is_arrow_function(node)

    return test


def _is_expression(node: Node, source_code: SourceCode) -> bool:
    return node.type == "expression_statement" and not is_directive_prologue(node, source_code)


STATEMENT_TYPES: Dict[str, Tester] = {
    "*": lambda node, source_code: True,
    "arrow": is_arrow_function,
    "block": new_node_type_tester("statement_block"),
    "block-like": is_block_like_statement,
    "break": new_keyword_tester("break"),
    "case": new_keyword_tester("case"),
    "cjs-export": _is_cjs_export,
    "cjs-import": _is_cjs_import,
    "class": new_keyword_tester("class"),
    "const": _new_declaration_tester("const"),
    "continue": new_keyword_tester("continue"),
    "debugger": new_keyword_tester("debugger"),
    "default": new_keyword_tester("default"),
    "directive": is_directive_prologue,
    "do": new_keyword_tester("do"),
    "empty": new_node_type_tester("empty_statement"),
    "export": new_keyword_tester("export"),
    "expression": _is_expression,
    "for": new_keyword_tester("for"),
    "function": new_node_type_tester(*FUNCTION_DECLARATION_TYPES),
    "if": new_keyword_tester("if"),
    "iife": is_iife_statement,
    "import": new_keyword_tester("import"),
    "let": _new_declaration_tester("let"),
    "multiline-block-like": lambda node, source_code: (
        is_multiline(node, source_code) and is_block_like_statement(node, source_code)
    ),
    "multiline-const": new_multiline_keyword_tester("const"),
    "multiline-expression": lambda node, source_code: (
        is_multiline(node, source_code) and _is_expression(node, source_code)
    ),
    "multiline-let": new_multiline_keyword_tester("let"),
    "multiline-var": new_multiline_keyword_tester("var"),
    "return": new_keyword_tester("return"),
    "singleline-const": new_singleline_keyword_tester("const"),
    "singleline-let": new_singleline_keyword_tester("let"),
    "singleline-var": new_singleline_keyword_tester("var"),
    "switch": new_keyword_tester("switch"),
    "throw": new_keyword_tester("throw"),
    "try": new_keyword_tester("try"),
    "var": new_keyword_tester("var"),
    "while": new_keyword_tester("while"),
    "with": new_keyword_tester("with"),
}


def match(node: Node, selector: Selector, source_code: SourceCode) -> bool:
    """Check whether a statement belongs to the category (or any of the categories) in `selector`"""
    inner = JSPatterns.unwrap_labels(node)
    if isinstance(selector, str):
        return STATEMENT_TYPES[selector](inner, source_code)
    return any(STATEMENT_TYPES[name](inner, source_code) for name in selector)


def classify(node: Node, source_code: SourceCode) -> List[str]:
    """All categories a statement belongs to, `*` excluded"""
    inner = JSPatterns.unwrap_labels(node)
    return [name for name, test in STATEMENT_TYPES.items() if name != "*" and test(inner, source_code)]
