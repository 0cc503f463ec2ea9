"""Unit tests for config settings & validation."""

import os
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from scribe.config.settings import EnvSettingsLoader, ScribeSettings, Settings
from scribe.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from scribe.kernel import FailurePolicy


# ---------------------------------------------------------------------------
# Generic settings class exercising value coercion
# ---------------------------------------------------------------------------


@dataclass
class SinkSettings(Settings):
    _prefix: ClassVar[str] = "SINK"

    url: str = "http://localhost"
    timeout: float = 5.0
    retries: int = 0
    verbose: bool = False
    tags: list[str] = field(default_factory=list)


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        settings = EnvSettingsLoader().load(SinkSettings)
        assert settings.url == "http://localhost"
        assert settings.tags == []

    def test_coerces_scalar_types(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINK_TIMEOUT", "2.5")
        monkeypatch.setenv("SINK_RETRIES", "3")
        monkeypatch.setenv("SINK_VERBOSE", "yes")
        settings = EnvSettingsLoader().load(SinkSettings)
        assert settings.timeout == 2.5
        assert settings.retries == 3
        assert settings.verbose is True

    def test_list_is_comma_separated(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINK_TAGS", "a, b,,c")
        assert EnvSettingsLoader().load(SinkSettings).tags == ["a", "b", "c"]

    def test_bad_number_raises_value_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINK_RETRIES", "many")
        with pytest.raises(ValueError):
            EnvSettingsLoader().load(SinkSettings)

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SINK_URL", "http://from-env")
        settings = EnvSettingsLoader().load(SinkSettings, url="http://override")
        assert settings.url == "http://override"


# ---------------------------------------------------------------------------
# ScribeSettings
# ---------------------------------------------------------------------------


class TestScribeSettingsFromEnv:
    def test_loads_from_scribe_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIBE_LABEL", "billing")
        monkeypatch.setenv("SCRIBE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SCRIBE_LOG_FORMAT", "console")
        monkeypatch.setenv("SCRIBE_FAILURE_POLICY", "collect")
        settings = EnvSettingsLoader().load(ScribeSettings)
        assert settings.label == "billing"
        assert settings.log_level == "debug"
        assert settings.log_format == "console"
        assert FailurePolicy(settings.failure_policy) is FailurePolicy.COLLECT

    def test_missing_label_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SCRIBE_LABEL", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(ScribeSettings)
        assert exc_info.value.setting_name == "SCRIBE_LABEL"

    def test_invalid_env_value_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIBE_LABEL", "svc")
        monkeypatch.setenv("SCRIBE_LOG_FORMAT", "xml")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(ScribeSettings)

    def test_callables_never_read_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIBE_LABEL", "svc")
        monkeypatch.setenv("SCRIBE_METADATA_PROVIDER", "os.environ")
        settings = EnvSettingsLoader().load(ScribeSettings)
        assert settings.metadata_provider is None

    def test_callables_supplied_as_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCRIBE_LABEL", "svc")

        def ambient() -> dict[str, str]:
            return {"pid": str(os.getpid())}

        settings = EnvSettingsLoader().load(ScribeSettings, metadata_provider=ambient)
        assert settings.metadata_provider is ambient


class TestScribeSettingsValidation:
    def test_defaults(self) -> None:
        settings = ScribeSettings(label="svc")
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.failure_policy == "first"

    def test_empty_label_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ScribeSettings(label="")
        assert exc_info.value.setting_name == "label"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="log_level"):
            ScribeSettings(label="svc", log_level="loud")

    def test_unknown_failure_policy_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError, match="failure_policy"):
            ScribeSettings(label="svc", failure_policy="ignore")

    def test_validation_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            ScribeSettings(label="svc", log_format="yaml")


class TestExplicitEnviron:
    def test_reads_given_mapping_instead_of_os_environ(self) -> None:
        loader = EnvSettingsLoader(environ={"SCRIBE_LABEL": "from-mapping"})
        assert loader.load(ScribeSettings).label == "from-mapping"

    def test_env_key(self) -> None:
        assert EnvSettingsLoader.env_key(ScribeSettings, "log_format") == "SCRIBE_LOG_FORMAT"

    def test_missing_setting_detail(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader(environ={}).load(ScribeSettings)
        assert exc_info.value.detail == {"setting": "SCRIBE_LABEL"}
