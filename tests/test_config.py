import pytest

from js_cli.config import LintConfig
from js_linter.config import PaddingLinesConfig, PaddingRuleConfig, load_config
from js_linter.exceptions import ConfigError
from js_linter.padding import PaddingType


def test_defaults():
    config = PaddingLinesConfig()
    assert config.statements == []
    assert config.objects == "never"
    assert config.select == ["padding-lines"]


def test_rule_accepts_alias_and_field_name():
    by_alias = PaddingRuleConfig.model_validate({"blankLine": "always", "prev": "*", "next": ["const", "let"]})
    by_name = PaddingRuleConfig(blank_line="always", prev="*", next=["const", "let"])
    assert by_alias == by_name
    assert by_alias.blank_line is PaddingType.ALWAYS


def test_unknown_key_is_rejected():
    with pytest.raises(ConfigError):
        load_config({"statement": []})


def test_objects_any_is_rejected():
    with pytest.raises(ConfigError):
        load_config({"objects": "any"})


def test_top_level_keys(tmp_path):
    path = tmp_path / ".padding-lines.toml"
    path.write_text(
        'objects = "always"\n'
        "\n"
        "[[statements]]\n"
        'blankLine = "always"\n'
        'prev = "*"\n'
        'next = "return"\n'
    )
    config = LintConfig(path)
    assert config.path == path
    assert config.settings.objects == "always"
    assert config.settings.statements[0].next == "return"


def test_tool_table(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text(
        "[tool.padding-lines]\n"
        'ignore = ["padding-lines/objects"]\n'
        "\n"
        "[[tool.padding-lines.statements]]\n"
        'blankLine = "never"\n'
        'prev = ["const", "let"]\n'
        'next = ["const", "let"]\n'
    )
    config = LintConfig(path)
    registry = config.build_registry()
    assert [r.rule_id for r in config.apply_to_registry(registry)] == ["padding-lines/statements"]
    assert config.settings.statements[0].blank_line is PaddingType.NEVER


def test_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = LintConfig(tmp_path / "absent.toml")
    assert config.path is None
    assert config.settings == PaddingLinesConfig()


def test_pyproject_without_table_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')
    config = LintConfig(tmp_path / "absent.toml")
    assert config.path is None


def test_invalid_toml(tmp_path):
    path = tmp_path / ".padding-lines.toml"
    path.write_text("objects = \n")
    with pytest.raises(ConfigError):
        LintConfig(path)


def test_invalid_statement_type(tmp_path):
    path = tmp_path / ".padding-lines.toml"
    path.write_text('[[statements]]\nblankLine = "always"\nprev = "nope"\nnext = "*"\n')
    with pytest.raises(ConfigError):
        LintConfig(path)


def test_override(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = LintConfig(None)
    config.override(objects="always", select=None)
    assert config.settings.objects == "always"
    assert config.settings.select == ["padding-lines"]
    with pytest.raises(ConfigError):
        config.override(objects="sometimes")
