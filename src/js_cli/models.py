from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    STYLE = "STYLE"
    INFO = "INFO"


class TextEdit(BaseModel):
    """Byte-range replacement proposed for an issue"""

    model_config = ConfigDict(frozen=True)

    start_byte: int
    end_byte: int
    replacement: str


class LintIssue(BaseModel):
    """A padding issue as shown to users"""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    message_id: str
    message: str
    severity: Severity
    file_path: str
    line: int
    column: int
    edit: Optional[TextEdit] = None

    @property
    def auto_fixable(self) -> bool:
        return self.edit is not None

    def format(self) -> str:
        return f"{self.severity.value}: {self.file_path}:{self.line}:{self.column} [{self.rule_id}] - {self.message}"
