"""Tests for the loginkit CLI."""

import argparse
import json
import logging

import pytest

from loginkit.cli import main
from loginkit.cli._input import config_from_args
from loginkit.config import LOG_LEVELS, FormConfig

VALID_PAIRS = [
    "fullName=Maria Silva",
    "age=27",
    "email=maria@example.com",
    "password=s3gredo",
]


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    @pytest.mark.parametrize("command", ["validate", "fields", "render"])
    def test_subcommand_help_exits_zero(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command, "--help"])
        assert exc_info.value.code == 0

    def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "--variant", "formik"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "loginkit" in captured.out


# ---------------------------------------------------------------------------
# loginkit validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_valid_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", *VALID_PAIRS])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4
        assert all(line.endswith("ok") for line in lines)

    def test_invalid_input_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "fullName=Maria Silva", "age=17"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Idade mínima: 18 anos." in out
        # Fields not given validate as empty
        assert "Mínimo de 5 caracteres." in out
        assert "Senha precisa de 6+ caracteres." in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", "--json", *VALID_PAIRS[:1], "age=2a7", *VALID_PAIRS[2:]])
        payload = json.loads(capsys.readouterr().out)
        assert payload["valid"] is True
        assert payload["errors"] == {}
        assert payload["values"]["age"] == "27"
        assert payload["values"]["password"] == "*******"

    def test_json_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["validate", "--json", "fullName=John3 Doe"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["valid"] is False
        assert payload["errors"]["fullName"] == "Apenas letras (sem números)."

    @pytest.mark.parametrize("variant", ["schema", "schema-live"])
    def test_schema_variants(self, variant: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", "--variant", variant, *VALID_PAIRS])
        assert "ok" in capsys.readouterr().out

    def test_permissive_email_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        pairs = [*VALID_PAIRS[:2], "email=a@b.c", VALID_PAIRS[3]]
        with pytest.raises(SystemExit):
            main(["validate", *pairs])
        capsys.readouterr()
        main(["validate", "--email-pattern", "permissive", *pairs])

    def test_admin_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["validate", "--admin", "--json", *VALID_PAIRS, "isAdmin=yes"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["values"]["isAdmin"] is True
        assert payload["valid"] is True

    def test_unknown_field_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "username=maria"])
        assert exc_info.value.code == 2
        assert "username" in capsys.readouterr().err

    def test_malformed_pair_exits_two(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["validate", "age"])
        assert exc_info.value.code == 2
        assert "field=value" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# loginkit fields
# ---------------------------------------------------------------------------


class TestFields:
    def test_lists_rule_chains(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["fields"])
        out = capsys.readouterr().out
        assert "fullName (text): min_tokens, tokens_match" in out
        assert "age (numeric): non_empty, digits, at_least" in out
        assert "email (email): min_length, email" in out
        assert "password (secret): min_length" in out
        assert "isAdmin" not in out

    def test_admin_has_no_rules(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["fields", "--admin"])
        assert "isAdmin (flag): -" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# loginkit render
# ---------------------------------------------------------------------------


class TestRender:
    def test_render_prints_html(self, capsys: pytest.CaptureFixture[str]) -> None:
        pytest.importorskip("kida")
        main(["render", "age=17"])
        out = capsys.readouterr().out
        assert "<form" in out
        assert "Idade mínima: 18 anos." in out


# ---------------------------------------------------------------------------
# Logging level
# ---------------------------------------------------------------------------


def _form_args(**overrides) -> argparse.Namespace:
    values = {"email_pattern": "strict", "admin": False, "variant": "manual", "log_level": None}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestLogLevel:
    def test_unset_flag_keeps_config_default(self) -> None:
        assert config_from_args(_form_args()).log_level == FormConfig().log_level

    def test_flag_overrides_config(self) -> None:
        assert config_from_args(_form_args(log_level="debug")).log_level == "debug"

    def test_logging_configured_from_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        main(["fields"])
        assert calls[0]["level"] == "WARNING"

    @pytest.mark.parametrize("level", LOG_LEVELS)
    def test_every_config_level_accepted(
        self, level: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        main(["--log-level", level, "fields"])
        assert calls[0]["level"] == level.upper()
