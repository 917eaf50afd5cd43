from typing import Any, Iterable, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .padding import PaddingType, selector_names
from .statement_types import STATEMENT_TYPES


class PaddingRuleConfig(BaseModel):
    """One `{blankLine, prev, next}` entry of the statement padding configuration"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="forbid")

    blank_line: PaddingType = Field(alias="blankLine")
    prev: Union[str, List[str]]
    next: Union[str, List[str]]

    @field_validator("prev", "next")
    @classmethod
    def _check_selector(cls, value: Union[str, List[str]]) -> Union[str, List[str]]:
        names = selector_names(value)
        if not names:
            raise ValueError("selector must name at least one statement type")
        if len(set(names)) != len(names):
            raise ValueError("selector names must be unique")
        unknown = [name for name in names if name not in STATEMENT_TYPES]
        if unknown:
            raise ValueError(f"unknown statement type(s): {', '.join(unknown)}")
        return value


class PaddingLinesConfig(BaseModel):
    """Settings for both padding rules plus rule selection"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    statements: List[PaddingRuleConfig] = Field(default_factory=list)
    objects: Literal["always", "never"] = "never"
    select: List[str] = Field(default_factory=lambda: ["padding-lines"])
    ignore: List[str] = Field(default_factory=list)


def load_statement_rules(rules: Iterable[Union[PaddingRuleConfig, dict]]) -> List[PaddingRuleConfig]:
    """Validate a statement padding configuration given as dicts or models"""
    try:
        return [r if isinstance(r, PaddingRuleConfig) else PaddingRuleConfig.model_validate(r) for r in rules]
    except ValidationError as e:
        raise ConfigError(f"Invalid statement padding configuration: {e}") from e


def load_config(data: dict[str, Any]) -> PaddingLinesConfig:
    try:
        return PaddingLinesConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid padding-lines configuration: {e}") from e
