import logging
import tomllib
from pathlib import Path
from typing import Any

from js_linter.config import PaddingLinesConfig, load_config
from js_linter.exceptions import ConfigError
from js_linter.registry import LintRule, RuleRegistry

logger = logging.getLogger(__name__)


class LintConfig:
    """Handles loading of .padding-lines.toml (or [tool.padding-lines] in pyproject.toml)"""

    def __init__(self, config_path: Path | None = None):
        self.path: Path | None = None
        self.settings = PaddingLinesConfig()

        if config_path and config_path.exists():
            self._load_from_file(config_path)
        elif Path("pyproject.toml").exists():
            self._load_from_file(Path("pyproject.toml"), required=False)

    def _load_from_file(self, path: Path, required: bool = True):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        table = data.get("tool", {}).get("padding-lines")
        if table is None:
            if not required:
                return
            table = data
        self.settings = load_config(table)
        self.path = path
        logger.debug("Loaded configuration from %s", path)

    def override(self, **values: Any):
        """Replace settings given on the command line"""
        values = {k: v for k, v in values.items() if v is not None}
        if values:
            self.settings = load_config({**self.settings.model_dump(by_alias=True), **values})

    def build_registry(self) -> RuleRegistry:
        return RuleRegistry(self.settings)

    def apply_to_registry(self, registry: RuleRegistry) -> list[LintRule]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.settings.select, ignore=self.settings.ignore)
