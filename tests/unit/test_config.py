"""Unit tests for configuration management."""

import json

import pytest

from rulevalidation.config import (
    CONFIG_FILE_NAME,
    LogLevel,
    MessagesConfig,
    OutputFormat,
    RuleValidationConfig,
    find_config_file,
    load_config,
)


class TestRuleValidationConfig:
    """Test complete RuleValidationConfig model."""

    def test_defaults(self):
        config = RuleValidationConfig()

        assert config.messages.missing_value == "Missing required value"
        assert config.messages.per_key == {}
        assert config.output.format == OutputFormat.TABLE
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict_with_aliases(self):
        config_data = {
            "messages": {
                "missingValue": "This field is required",
                "perKey": {"title": "Please provide a title"},
            },
            "output": {"format": "json"},
            "logging": {"level": "debug"},
        }

        config = RuleValidationConfig(**config_data)

        assert config.messages.missing_value == "This field is required"
        assert config.messages.per_key == {"title": "Please provide a title"}
        assert config.output.format == OutputFormat.JSON
        assert config.logging.level == LogLevel.DEBUG

    def test_field_names_accepted(self):
        messages = MessagesConfig(missing_value="Required", per_key={"a": "A please"})
        assert messages.missing_value == "Required"

    def test_extra_sections_forbidden(self):
        with pytest.raises(ValueError):
            RuleValidationConfig(unknown={"x": 1})

    def test_blank_missing_value_rejected(self):
        with pytest.raises(ValueError):
            MessagesConfig(missingValue="   ")

    def test_invalid_output_format_rejected(self):
        with pytest.raises(ValueError):
            RuleValidationConfig(output={"format": "xml"})

    def test_missing_value_result_factory(self):
        config = RuleValidationConfig(
            messages={"missingValue": "Required", "perKey": {"title": "Please provide a title"}}
        )
        factory = config.missing_value_result_factory()

        assert factory("title").message == "Please provide a title"
        assert factory("body").message == "Required"
        assert factory("body").valid is False


class TestConfigLoading:
    """Test configuration file loading."""

    def test_load_explicit_file(self, tmp_path):
        config_file = tmp_path / "custom.json"
        config_file.write_text(json.dumps({"output": {"format": "markdown"}}), encoding="utf-8")

        config = load_config(config_file)
        assert config.output.format == OutputFormat.MARKDOWN

    def test_load_missing_file_returns_defaults(self, tmp_path):
        config = load_config(tmp_path / "does-not-exist.json")
        assert config == RuleValidationConfig()

    def test_invalid_json_raises_value_error(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(config_file)

    def test_non_object_raises_value_error(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            load_config(config_file)

    def test_invalid_content_raises_value_error(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_find_config_file_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_search_from_current_directory(self, tmp_path, monkeypatch):
        (tmp_path / CONFIG_FILE_NAME).write_text(
            json.dumps({"messages": {"missingValue": "Required"}}), encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert load_config().messages.missing_value == "Required"
