import pytest

from js_linter.engine import LinterEngine
from js_linter.exceptions import ConfigError
from js_linter.rules.statement_padding import ScopeTracker, StatementPaddingRule

ALWAYS_BETWEEN_ALL = [{"blankLine": "always", "prev": "*", "next": "*"}]
NEVER_BETWEEN_ALL = [{"blankLine": "never", "prev": "*", "next": "*"}]


def _lint(code: str, config):
    return LinterEngine().lint_string(code, rules=[StatementPaddingRule(config)])


def _fix(code: str, config):
    return LinterEngine().fix_string(code, rules=[StatementPaddingRule(config)])


def test_missing_blank_line_between_declarations():
    issues = _lint("const a = 1\nconst b = 2", ALWAYS_BETWEEN_ALL)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.message_id == "expectedBlankLine"
    assert issue.message == "Expected blank line above."
    assert issue.rule_id == "padding-lines/statements"
    assert issue.line == 2
    assert issue.column == 1
    assert issue.auto_fixable


def test_fix_inserts_blank_line_and_is_stable():
    result = _fix("const a = 1\nconst b = 2", ALWAYS_BETWEEN_ALL)
    assert result.source == "const a = 1\n\nconst b = 2"
    assert result.modified
    assert result.passes == 1
    assert result.issues == []
    assert _fix(result.source, ALWAYS_BETWEEN_ALL).modified is False


def test_unexpected_blank_line_keeps_trailing_comment():
    issues = _lint("foo() // keep\n\nbar()", NEVER_BETWEEN_ALL)
    assert [i.message_id for i in issues] == ["unexpectedBlankLine"]
    assert issues[0].message == "Unexpected blank line above."
    assert _fix("foo() // keep\n\nbar()", NEVER_BETWEEN_ALL).source == "foo() // keep\nbar()"


def test_blank_lines_split_by_comment_are_reported_without_fix():
    code = "foo()\n\n// c\n\nbar()"
    issues = _lint(code, NEVER_BETWEEN_ALL)
    assert len(issues) == 1
    assert issues[0].fix is None
    assert not issues[0].auto_fixable
    result = _fix(code, NEVER_BETWEEN_ALL)
    assert result.source == code
    assert result.passes == 0


def test_empty_configuration_reports_nothing():
    assert _lint("const a = 1\nconst b = 2\n\n\nfoo()", []) == []


def test_unmatched_pairs_are_not_checked():
    config = [{"blankLine": "always", "prev": "return", "next": "*"}]
    assert _lint("const a = 1\nfoo()", config) == []


def test_each_block_has_its_own_previous_statement():
    code = "function f() {\n  const a = 1\n  const b = 2\n}\nconst c = 3"
    issues = _lint(code, ALWAYS_BETWEEN_ALL)
    assert [i.line for i in issues] == [3, 5]


def test_first_statement_of_block_is_not_compared_with_outer_statement():
    code = "foo()\n\nif (a) {\n  bar()\n}"
    assert _lint(code, ALWAYS_BETWEEN_ALL) == []


def test_switch_cases():
    code = "switch (a) {\n  case 1:\n    foo()\n  case 2:\n    bar()\n}"
    config = [{"blankLine": "always", "prev": "case", "next": "case"}]
    issues = _lint(code, config)
    assert [i.line for i in issues] == [4]


def test_statements_inside_case_are_compared():
    code = "switch (a) {\n  case 1:\n    foo()\n    bar()\n}"
    config = [{"blankLine": "always", "prev": "expression", "next": "expression"}]
    assert [i.line for i in _lint(code, config)] == [4]


def test_blank_line_after_directive():
    config = [{"blankLine": "always", "prev": "directive", "next": "*"}]
    result = _fix("'use strict'\nfoo()", config)
    assert result.source == "'use strict'\n\nfoo()"


def test_directives_among_themselves():
    config = [
        {"blankLine": "always", "prev": "directive", "next": "*"},
        {"blankLine": "any", "prev": "directive", "next": "directive"},
    ]
    assert _lint("'use strict'\n'use asm'\nfoo()", config)[0].line == 3


def test_labeled_statement_matches_its_body():
    config = [{"blankLine": "always", "prev": "*", "next": "for"}]
    issues = _lint("a()\nouter: for (;;) {}", config)
    assert [i.line for i in issues] == [2]


def test_fix_goes_after_trailing_comment():
    result = _fix("foo(); // trailing\n// comment\nbar();", ALWAYS_BETWEEN_ALL)
    assert result.source == "foo(); // trailing\n\n// comment\nbar();"


def test_statements_on_one_line():
    result = _fix("foo(); bar();", ALWAYS_BETWEEN_ALL)
    assert result.source == "foo();\n\n bar();"


def test_multiline_block_like():
    config = [{"blankLine": "always", "prev": "multiline-block-like", "next": "*"}]
    code = "if (a) {\n  b()\n}\nc()\nif (d) { e() }\nf()"
    issues = _lint(code, config)
    assert [i.line for i in issues] == [4]
    assert _fix(code, config).source == "if (a) {\n  b()\n}\n\nc()\nif (d) { e() }\nf()"


def test_never_fix_keeps_indentation():
    code = "function f() {\n  foo()\n\n\n  bar()\n}"
    result = _fix(code, NEVER_BETWEEN_ALL)
    assert result.source == "function f() {\n  foo()\n  bar()\n}"


def test_invalid_configuration():
    with pytest.raises(ConfigError):
        StatementPaddingRule([{"blankLine": "sometimes", "prev": "*", "next": "*"}])
    with pytest.raises(ConfigError):
        StatementPaddingRule([{"blankLine": "always", "prev": "nonsense", "next": "*"}])
    with pytest.raises(ConfigError):
        StatementPaddingRule([{"blankLine": "always", "prev": [], "next": "*"}])
    with pytest.raises(ConfigError):
        StatementPaddingRule([{"blankLine": "always", "prev": ["if", "if"], "next": "*"}])


def test_scope_tracker():
    tracker = ScopeTracker()
    tracker.enter()
    tracker.current.prev_node = "outer"
    tracker.enter()
    assert tracker.current.prev_node is None
    assert tracker.depth == 2
    tracker.exit()
    assert tracker.current.prev_node == "outer"
    tracker.exit()
    with pytest.raises(RuntimeError):
        tracker.exit()


def test_leading_semicolon_kept_when_removing_blank_lines():
    result = _fix("a()\n\n\n;[1].map(b)", NEVER_BETWEEN_ALL)
    assert result.source == "a()\n;[1].map(b)"


def test_static_block_has_its_own_scope():
    code = "class A {\n  static {\n    a()\n    b()\n  }\n}"
    issues = _lint(code, ALWAYS_BETWEEN_ALL)
    assert [i.line for i in issues] == [4]


def test_deeply_nested_expression():
    code = "x = " + " + ".join(["a"] * 3000) + "\nfoo()"
    issues = _lint(code, ALWAYS_BETWEEN_ALL)
    assert [i.line for i in issues] == [2]
