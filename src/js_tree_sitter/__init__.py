from .ast_walker import ASTWalker
from .js_patterns import JSPatterns
from .models import ParseResult, Token
from .parser import JSParser, ParseError
from .source_code import SourceCode

__all__ = [
    "ASTWalker",
    "JSPatterns",
    "JSParser",
    "ParseError",
    "ParseResult",
    "SourceCode",
    "Token",
]
