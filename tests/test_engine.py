from pathlib import Path

import pytest

from js_linter.autofix import AutoFixEngine
from js_linter.config import PaddingLinesConfig
from js_linter.engine import LinterEngine
from js_linter.models import Fix, InternalIssue, Severity
from js_linter.registry import RuleRegistry
from js_linter.rules import ObjectPaddingRule, StatementPaddingRule
from js_tree_sitter.parser import ParseError


def _issue(fix):
    return InternalIssue(
        file_path=None,
        line=1,
        column=1,
        rule_id="padding-lines/statements",
        message_id="expectedBlankLine",
        message="Expected blank line above.",
        severity=Severity.STYLE,
        auto_fixable=fix is not None,
        fix=fix,
    )


class TestAutoFixEngine:
    def test_applies_fixes_in_source_order(self):
        issues = [_issue(Fix(3, 3, "!")), _issue(Fix(0, 1, "x"))]
        assert AutoFixEngine().apply_fixes("abcdef", issues) == "xbc!def"

    def test_skips_overlapping_fix(self):
        issues = [_issue(Fix(0, 3, "X")), _issue(Fix(2, 4, "Y"))]
        assert AutoFixEngine().apply_fixes("abcdef", issues) == "Xdef"

    def test_skips_touching_fix(self):
        issues = [_issue(Fix(0, 2, "X")), _issue(Fix(2, 2, "Y"))]
        assert AutoFixEngine().apply_fixes("abcdef", issues) == "Xcdef"

    def test_ignores_issues_without_fix(self):
        assert AutoFixEngine().apply_fixes("abc", [_issue(None)]) == "abc"

    def test_offsets_are_bytes(self):
        source = "x = 'é'\ny = 1"
        offset = len("x = 'é'".encode("utf-8"))
        assert AutoFixEngine().apply_fixes(source, [_issue(Fix(offset, offset, "\n"))]) == "x = 'é'\n\ny = 1"


class TestRuleRegistry:
    def test_default_rules(self):
        registry = RuleRegistry()
        ids = [r.rule_id for r in registry.get_enabled_rules()]
        assert ids == ["padding-lines/statements", "padding-lines/objects"]
        assert len(registry.get_all_rules()) == 2

    def test_ignore_by_prefix(self):
        registry = RuleRegistry()
        ids = [r.rule_id for r in registry.get_enabled_rules(ignore=["padding-lines/objects"])]
        assert ids == ["padding-lines/statements"]

    def test_select_by_prefix(self):
        registry = RuleRegistry(PaddingLinesConfig(select=["padding-lines/obj"]))
        assert [r.rule_id for r in registry.get_enabled_rules()] == ["padding-lines/objects"]

    def test_get_rule(self):
        registry = RuleRegistry()
        assert isinstance(registry.get_rule("padding-lines/objects"), ObjectPaddingRule)
        assert isinstance(registry.get_rule("padding-lines/statements"), StatementPaddingRule)
        assert registry.get_rule("missing") is None


class TestLinterEngine:
    def test_default_registry_checks_objects(self):
        issues = LinterEngine().lint_string("x = {\n  a: 1,\n\n  b: 2\n}")
        assert [i.rule_id for i in issues] == ["padding-lines/objects"]

    def test_configured_statements(self):
        config = PaddingLinesConfig(statements=[{"blankLine": "always", "prev": "*", "next": "*"}])
        engine = LinterEngine(RuleRegistry(config))
        issues = engine.lint_string("foo()\nbar()\nx = {\n\n  a: 1\n}")
        assert [(i.line, i.rule_id) for i in issues] == [
            (2, "padding-lines/statements"),
            (3, "padding-lines/statements"),
            (5, "padding-lines/objects"),
        ]

    def test_issues_carry_file_path(self):
        path = Path("app.js")
        issues = LinterEngine().lint_string("x = {\n\n  a: 1\n}", file_path=path)
        assert issues[0].file_path == path

    def test_fix_string_reports_remaining_issues(self):
        config = [{"blankLine": "never", "prev": "*", "next": "*"}]
        result = LinterEngine().fix_string("foo()\n\n// c\n\nbar()", rules=[StatementPaddingRule(config)])
        assert not result.modified
        assert [i.message_id for i in result.issues] == ["unexpectedBlankLine"]

    def test_fix_string_stops_at_max_passes(self):
        result = LinterEngine().fix_string("x = {a: 1}", rules=[ObjectPaddingRule("always")], max_passes=1)
        assert result.passes == 1
        assert result.modified

    def test_lint_file(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("x = {\n  a: 1,\n\n  b: 2\n}\n")
        issues = LinterEngine().lint_file(path)
        assert len(issues) == 1
        assert issues[0].file_path == path

    def test_fix_file_writes_result(self, tmp_path):
        path = tmp_path / "a.js"
        path.write_text("x = {\n  a: 1,\n\n  b: 2\n}\n")
        result = LinterEngine().fix_file(path)
        assert result.modified
        assert path.read_text() == "x = {\n  a: 1,\n  b: 2\n}\n"

    def test_fix_file_without_write(self, tmp_path):
        path = tmp_path / "a.js"
        content = "x = {\n  a: 1,\n\n  b: 2\n}\n"
        path.write_text(content)
        result = LinterEngine().fix_file(path, write=False)
        assert result.modified
        assert path.read_text() == content

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParseError):
            LinterEngine().lint_file(tmp_path / "missing.js")
