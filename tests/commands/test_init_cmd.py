"""Tests for the init CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from crateguard.cli import cli


@pytest.mark.usefixtures("_isolated_root")
class TestInitCommand:
    def test_creates_database(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "init"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "init"
        assert Path(data["data"]["path"]) == tmp_path / ".crateguard" / "registry.db"
        assert (tmp_path / ".crateguard" / "registry.db").is_file()

    def test_idempotent(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0
        assert cli_runner.invoke(cli, ["init"]).exit_code == 0

    def test_path_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "crateguard.toml").write_text('[database]\npath = "data/counts.db"\n')
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert (tmp_path / "data" / "counts.db").is_file()

    def test_path_from_env(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        target = tmp_path / "env" / "r.db"
        monkeypatch.setenv("CRATEGUARD_DATABASE__PATH", str(target))
        result = cli_runner.invoke(cli, ["init"])
        assert result.exit_code == 0
        assert target.is_file()
