"""Tests for the check CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from crateguard.cli import cli

Builder = Callable[..., dict[str, Any]]


@pytest.mark.usefixtures("_isolated_root")
class TestCheckCommand:
    def test_valid_file(self, cli_runner: CliRunner, tmp_path: Path, make_payload: Builder) -> None:
        payload_file = tmp_path / "payload.json"
        payload_file.write_text(json.dumps(make_payload()))
        result = cli_runner.invoke(cli, ["check", str(payload_file)])
        assert result.exit_code == 0
        assert "check_publish" in result.output
        assert "my_crate" in result.output

    def test_stdin(self, cli_runner: CliRunner, make_payload: Builder) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "-"], input=json.dumps(make_payload()))
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["version"] == "1.2.3"

    def test_invalid_payload_exits_1(self, cli_runner: CliRunner, make_payload: Builder) -> None:
        payload = make_payload(keywords=["this-keyword-is-way-too-long"])
        result = cli_runner.invoke(cli, ["check", "-"], input=json.dumps(payload))
        assert result.exit_code == 1
        assert "keywords must contain less than 20 characters" in result.output
        assert "KEYWORD_TOO_LONG" in result.output

    def test_invalid_payload_json(self, cli_runner: CliRunner, make_payload: Builder) -> None:
        payload = make_payload(vers="1.2")
        result = cli_runner.invoke(cli, ["--json", "check", "-"], input=json.dumps(payload))
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_SEMVER"
        assert data["error"]["detail"]["location"] == "vers"

    def test_quiet(self, cli_runner: CliRunner, make_payload: Builder) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "-"], input=json.dumps(make_payload()))
        assert result.exit_code == 0
        assert result.output.strip() == "OK: check_publish"

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "nope.json"])
        assert result.exit_code == 2

    def test_does_not_create_database(
        self, cli_runner: CliRunner, tmp_path: Path, make_payload: Builder
    ) -> None:
        cli_runner.invoke(cli, ["check", "-"], input=json.dumps(make_payload()))
        assert not (tmp_path / ".crateguard").exists()

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--examples"])
        assert result.exit_code == 0
        assert "crateguard check payload.json" in result.output

    def test_location_printed_once(self, cli_runner: CliRunner, make_payload: Builder) -> None:
        payload = make_payload(name="1bad")
        result = cli_runner.invoke(cli, ["check", "-"], input=json.dumps(payload))
        assert result.exit_code == 1
        assert "— invalid crate name specified: 1bad" in result.output
        assert "at: name" in result.output
        assert "name: invalid" not in result.output
