import logging
from pathlib import Path
from typing import List

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Node, Parser

from .models import ParseResult

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when a source file cannot be read"""


class JSParser:
    """Thin wrapper around tree-sitter configured for JavaScript"""

    def __init__(self):
        self.language = Language(tsjs.language())
        self.parser = Parser(self.language)

    def parse_string(self, source: str | bytes) -> ParseResult:
        """Parse source text. Syntax errors are collected, never raised."""
        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self.parser.parse(data)
        errors: List[str] = []
        if tree.root_node.has_error:
            self._collect_errors(tree.root_node, errors)
            logger.warning("Parsed with %d syntax error(s)", len(errors))
        return ParseResult(tree=tree, source=data, errors=errors)

    def parse_file(self, file_path: Path) -> ParseResult:
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise ParseError(f"Cannot read {file_path}: {e}") from e
        return self.parse_string(data)

    def _collect_errors(self, root: Node, errors: List[str]):
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR":
                errors.append(f"Syntax error at line {node.start_point[0] + 1}")
            elif node.is_missing:
                errors.append(f"Missing '{node.type}' at line {node.start_point[0] + 1}")
            stack.extend(c for c in reversed(node.children) if c.has_error or c.is_missing)
