from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


@dataclass(frozen=True)
class Fix:
    """A single contiguous byte-range edit"""

    start_byte: int
    end_byte: int
    text: str


@dataclass
class InternalIssue:
    """Internal representation of a linting issue"""

    file_path: Path | None
    line: int
    column: int
    rule_id: str
    message_id: str
    message: str
    severity: Severity
    auto_fixable: bool
    fix: Fix | None = None
    context: str | None = None


@dataclass
class FixResult:
    """Outcome of repeatedly applying fixes to one source"""

    source: str
    modified: bool
    passes: int
    issues: list[InternalIssue] = field(default_factory=list)
