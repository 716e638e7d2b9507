"""Smoke tests — verify scaffold wiring.

These tests prove that:
* The version is accessible.
* The exception hierarchy is correctly structured.
* Exit codes are defined.
* Settings read from the environment.
"""

from __future__ import annotations

import argparse

import pytest

from ffcli import __version__
from ffcli.cli import exit_codes
from ffcli.cli.app import run
from ffcli.config import DEFAULT_API_URL, DEFAULT_TIMEOUT, Settings
from ffcli.exceptions import (
    ErrorKind,
    FfcliError,
    FirefliesApiError,
    InvalidOptionError,
    ProtocolError,
    TransportError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize("exc_class", [FirefliesApiError, InvalidOptionError])
    def test_user_facing_exceptions_inherit_from_base(
        self, exc_class: type[FfcliError]
    ) -> None:
        assert issubclass(exc_class, FfcliError)

    @pytest.mark.parametrize("exc_class", [TransportError, ProtocolError])
    def test_raw_failures_are_not_user_facing(self, exc_class: type[Exception]) -> None:
        assert not issubclass(exc_class, FfcliError)

    def test_hint_is_stored(self) -> None:
        err = FfcliError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.message == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert FfcliError("boom").hint is None

    def test_api_error_carries_kind(self) -> None:
        err = FirefliesApiError(ErrorKind.FORBIDDEN, "nope")
        assert err.kind is ErrorKind.FORBIDDEN
        assert err.message == "nope"

    def test_error_kinds_are_closed_set(self) -> None:
        assert {kind.value for kind in ErrorKind} == {
            "no_api_key",
            "network_error",
            "auth_failed",
            "too_many_requests",
            "object_not_found",
            "paid_required",
            "forbidden",
            "not_in_team",
            "require_elevated_privilege",
            "unknown",
        }

    def test_protocol_error_message_uses_first_error(self) -> None:
        err = ProtocolError([{"message": "first"}, {"message": "second"}], status=200)
        assert "first" in str(err)
        assert "second" not in str(err)
        assert err.status == 200


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_usage_error_matches_argparse(self) -> None:
        parser = argparse.ArgumentParser(prog="x")
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--nope"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR

    def test_auth_without_key_is_general_error(self) -> None:
        assert run(["auth"]) == exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.api_url == DEFAULT_API_URL
        assert settings.timeout == DEFAULT_TIMEOUT

    def test_overrides(self) -> None:
        settings = Settings.from_env(
            {"FFCLI_API_URL": "http://localhost:9000/graphql", "FFCLI_TIMEOUT": "5"}
        )
        assert settings.api_url == "http://localhost:9000/graphql"
        assert settings.timeout == 5.0

    def test_config_path_follows_xdg(self, tmp_path) -> None:
        settings = Settings.from_env({"XDG_CONFIG_HOME": str(tmp_path)})
        assert settings.config_path == tmp_path / "ffcli" / "config.json"

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_timeout_raises(self, raw: str) -> None:
        with pytest.raises(InvalidOptionError, match="FFCLI_TIMEOUT"):
            Settings.from_env({"FFCLI_TIMEOUT": raw})
