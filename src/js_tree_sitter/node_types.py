"""Node type names of the tree-sitter-javascript grammar used by the padding rules."""

COMMENT_TYPES = frozenset({"comment", "html_comment"})

# Leaves of these types are kept as a single token instead of being split
# into their quote/fragment children.
ATOMIC_TOKEN_TYPES = frozenset({"string", "regex"})

STATEMENT_TYPES = frozenset(
    {
        "expression_statement",
        "variable_declaration",
        "lexical_declaration",
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "statement_block",
        "if_statement",
        "switch_statement",
        "for_statement",
        "for_in_statement",
        "while_statement",
        "do_statement",
        "try_statement",
        "with_statement",
        "break_statement",
        "continue_statement",
        "debugger_statement",
        "return_statement",
        "throw_statement",
        "empty_statement",
        "labeled_statement",
        "import_statement",
        "export_statement",
    }
)

SWITCH_CASE_TYPES = frozenset({"switch_case", "switch_default"})

# Nodes whose direct children form a list of sibling statements.
STATEMENT_LIST_PARENTS = frozenset(
    {"program", "statement_block", "class_static_block", "switch_body"} | SWITCH_CASE_TYPES
)

# Nodes that open a new "previous sibling" scope.
SCOPE_TYPES = frozenset(
    {"program", "statement_block", "class_static_block", "switch_statement"} | SWITCH_CASE_TYPES
)

VARIABLE_DECLARATION_TYPES = frozenset({"variable_declaration", "lexical_declaration"})

FUNCTION_DECLARATION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})

FUNCTION_TYPES = frozenset(
    {"function_expression", "function", "generator_function", "arrow_function"}
    | FUNCTION_DECLARATION_TYPES
)

# Closing braces owned by these nodes end a block.
BLOCK_OWNER_TYPES = frozenset({"statement_block", "switch_body"})

ASSIGNMENT_TYPES = frozenset({"assignment_expression", "augmented_assignment_expression"})
