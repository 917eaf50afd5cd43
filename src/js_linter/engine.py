import logging
from pathlib import Path
from typing import List, Optional

from js_tree_sitter.parser import JSParser
from js_tree_sitter.source_code import SourceCode

from .autofix import AutoFixEngine
from .models import FixResult, InternalIssue
from .registry import LintRule, RuleRegistry
from .rules.base import RuleContext

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for padding-lines linting"""

    def __init__(self, registry: RuleRegistry | None = None):
        self.parser = JSParser()
        self.registry = registry or RuleRegistry()
        self.autofix = AutoFixEngine()

    def lint_string(
        self, source: str | bytes, file_path: Path | None = None, rules: Optional[List[LintRule]] = None
    ) -> List[InternalIssue]:
        """Run the enabled rules on a source string"""
        parse_result = self.parser.parse_string(source)
        for error in parse_result.errors:
            logger.warning("%s: %s", file_path or "<string>", error)
        context = RuleContext(source_code=SourceCode(parse_result), file_path=file_path)
        issues: List[InternalIssue] = []
        for rule in self._rules(rules):
            issues.extend(rule.check(context))
        return sorted(issues, key=lambda x: (x.line, x.column))

    def lint_file(self, file_path: Path, rules: Optional[List[LintRule]] = None) -> List[InternalIssue]:
        parse_result = self.parser.parse_file(file_path)
        return self.lint_string(parse_result.source, file_path, rules)

    def fix_string(
        self,
        source: str,
        file_path: Path | None = None,
        rules: Optional[List[LintRule]] = None,
        max_passes: int = 10,
    ) -> FixResult:
        """Lint and fix until no fixable issue remains or `max_passes` is reached"""
        current = source
        passes = 0
        issues = self.lint_string(current, file_path, rules)
        while passes < max_passes and any(i.fix for i in issues):
            passes += 1
            fixed = self.autofix.apply_fixes(current, issues)
            logger.debug("Fix pass %d on %s", passes, file_path or "<string>")
            if fixed == current:
                break
            current = fixed
            issues = self.lint_string(current, file_path, rules)
        if passes == max_passes and any(i.fix for i in issues):
            logger.warning("Reached max fix passes for %s", file_path or "<string>")
        return FixResult(source=current, modified=current != source, passes=passes, issues=issues)

    def fix_file(
        self, file_path: Path, rules: Optional[List[LintRule]] = None, max_passes: int = 10, write: bool = True
    ) -> FixResult:
        source = self.parser.parse_file(file_path).source.decode("utf-8")
        result = self.fix_string(source, file_path, rules, max_passes)
        if write and result.modified:
            Path(file_path).write_text(result.source, encoding="utf-8")
        return result

    def _rules(self, rules: Optional[List[LintRule]]) -> List[LintRule]:
        return self.registry.get_enabled_rules() if rules is None else rules
