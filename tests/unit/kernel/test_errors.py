"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from scribe.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from scribe.kernel.errors import (
    DispatchError,
    ExternalServiceError,
    FormatterError,
    InfrastructureError,
    PluginError,
    ScribeError,
    StorageError,
    StorageNotFoundError,
    TimeoutError,
)


class TestScribeError:
    def test_message_is_stored(self) -> None:
        err = ScribeError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert ScribeError("m").code == "scribe_error"

    def test_custom_code(self) -> None:
        assert ScribeError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = ScribeError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "error": "ScribeError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_omits_empty_detail(self) -> None:
        assert "detail" not in PluginError("m").to_dict()

    def test_wrap_creates_caused_error(self) -> None:
        root = OSError("disk")
        err = StorageError.wrap(root, "write failed", path="a.log")
        assert isinstance(err, StorageError)
        assert err.__cause__ is root
        assert err.path == "a.log"

    def test_wrap_passes_matching_error_through(self) -> None:
        original = FormatterError("already wrapped")
        assert FormatterError.wrap(original, "ignored") is original
        assert isinstance(PluginError.wrap(original, "ignored"), FormatterError)

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = ScribeError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(ScribeError("oops", code="oops")))
        assert parsed["code"] == "oops"

    def test_repr(self) -> None:
        assert repr(PluginError("bad")) == "PluginError(code='plugin_error', message='bad')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [PluginError, FormatterError, DispatchError, InfrastructureError, ConfigError],
    )
    def test_direct_families_are_scribe_errors(self, cls: type) -> None:
        assert issubclass(cls, ScribeError)

    def test_formatter_error_is_plugin_error(self) -> None:
        assert issubclass(FormatterError, PluginError)

    def test_storage_not_found_chain(self) -> None:
        assert issubclass(StorageNotFoundError, StorageError)
        assert issubclass(StorageError, InfrastructureError)

    def test_timeout_and_external_are_infrastructure(self) -> None:
        assert issubclass(TimeoutError, InfrastructureError)
        assert issubclass(ExternalServiceError, InfrastructureError)

    def test_config_error_family(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)


class TestSpecificErrors:
    def test_plugin_error_carries_plugin_name(self) -> None:
        assert PluginError("x", plugin="file:app.log").plugin == "file:app.log"

    def test_storage_not_found_message(self) -> None:
        err = StorageNotFoundError("logs/app.log")
        assert err.path == "logs/app.log"
        assert "logs/app.log" in err.message
        assert err.code == "storage_not_found"

    def test_external_service_error_status(self) -> None:
        err = ExternalServiceError(service="http://logs", status_code=503)
        assert err.status_code == 503
        assert err.service == "http://logs"

    def test_dispatch_error_collects_failures(self) -> None:
        class Sink:
            name = "sink-a"

        first, second = ValueError("a"), RuntimeError("b")
        err = DispatchError([(Sink(), first), (object(), second)])
        assert err.errors == [first, second]
        assert err.cause is first
        assert err.detail["plugins"] == ["sink-a", "object"]
        assert err.message.startswith("2 plugin(s) failed")
