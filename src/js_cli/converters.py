from js_linter.models import InternalIssue

from .models import LintIssue, TextEdit


def internal_issue_to_lint_issue(issue: InternalIssue) -> LintIssue:
    """Convert an internal dataclass issue to an external Pydantic issue"""
    edit = None
    if issue.fix is not None:
        edit = TextEdit(start_byte=issue.fix.start_byte, end_byte=issue.fix.end_byte, replacement=issue.fix.text)
    return LintIssue(
        rule_id=issue.rule_id,
        message_id=issue.message_id,
        message=issue.message,
        severity=issue.severity.value.upper(),  # dataclass uses 'style', Pydantic uses 'STYLE'
        file_path=str(issue.file_path) if issue.file_path else "<string>",
        line=issue.line,
        column=issue.column,
        edit=edit,
    )
