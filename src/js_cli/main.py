import logging
from pathlib import Path
from typing import Optional

import typer
from js_linter.engine import LinterEngine
from js_linter.exceptions import ConfigError
from js_linter.statement_types import classify
from js_tree_sitter.ast_walker import ASTWalker
from js_tree_sitter.node_types import STATEMENT_LIST_PARENTS, STATEMENT_TYPES, SWITCH_CASE_TYPES
from js_tree_sitter.parser import JSParser, ParseError
from js_tree_sitter.source_code import SourceCode

from .config import LintConfig
from .converters import internal_issue_to_lint_issue

app = typer.Typer(help="padding-lines - Control blank lines between JavaScript statements and object properties")


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    files: list[Path] = typer.Argument(..., help="Files to lint"),
    config_file: Path = typer.Option(Path(".padding-lines.toml"), "--config", help="Path to config file"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
    objects: Optional[str] = typer.Option(None, help="Override object property padding (always|never)"),
    severity: str = typer.Option("STYLE", help="Minimum severity to show"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Run padding checks on JavaScript files"""
    _setup_logging(verbose)
    try:
        config = LintConfig(config_file)
        config.override(objects=objects)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    registry = config.build_registry()
    engine = LinterEngine(registry)
    enabled_rules = config.apply_to_registry(registry)
    all_issues = []
    failed = 0

    for file_path in files:
        try:
            if fix:
                result = engine.fix_file(file_path, rules=enabled_rules)
                if result.modified:
                    typer.echo(f"  🔧 Fixed {file_path.name} in {result.passes} pass(es)")
                all_issues.extend(result.issues)
            else:
                all_issues.extend(engine.lint_file(file_path, rules=enabled_rules))
        except ParseError as e:
            typer.echo(f"Error: {e}", err=True)
            failed += 1

    external_issues = [internal_issue_to_lint_issue(i) for i in all_issues]

    severity_rank = {"ERROR": 4, "WARNING": 3, "STYLE": 2, "INFO": 1}
    min_rank = severity_rank.get(severity.upper(), 2)

    reported_count = 0
    for issue in sorted(external_issues, key=lambda x: (x.file_path, x.line, x.column)):
        if severity_rank.get(issue.severity.value, 0) >= min_rank:
            typer.echo(issue.format())
            reported_count += 1

    typer.echo(f"\nTotal issues found: {len(external_issues)} ({reported_count} reported)")

    if reported_count or failed:
        raise typer.Exit(code=1)


@app.command("classify")
def classify_statements(
    file: Path = typer.Argument(..., help="File to inspect"),
):
    """Print the statement categories of every statement in a file"""
    try:
        parse_result = JSParser().parse_file(file)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    source_code = SourceCode(parse_result)

    def show(node):
        if node.type not in STATEMENT_TYPES and node.type not in SWITCH_CASE_TYPES:
            return
        if node.parent is None or node.parent.type not in STATEMENT_LIST_PARENTS:
            return
        line = source_code.get_start_line(node) + 1
        typer.echo(f"{line}: {node.type} -> {', '.join(classify(node, source_code))}")

    ASTWalker.walk(parse_result.root_node, show)


if __name__ == "__main__":
    app()
