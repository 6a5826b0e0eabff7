"""Tests for the downloads CLI command group."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import insert

from crateguard.cli import cli
from crateguard.infrastructure.database.engine import init_database
from crateguard.infrastructure.database.schema import crate_downloads, version_downloads

DATE = datetime(2014, 11, 25, 23, 16, 13)


@pytest.fixture
def seeded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    engine = init_database(tmp_path / ".crateguard" / "registry.db")
    with engine.begin() as conn:
        conn.execute(
            insert(version_downloads).values(
                id=1, version_id=10, downloads=5, counted=3, date=DATE
            )
        )
        conn.execute(insert(crate_downloads).values(id=7, crate_id=2, downloads=40, date=DATE))
    engine.dispose()


@pytest.mark.usefixtures("seeded")
class TestDownloadsVersion:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "downloads", "version", "1"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "version_download"
        assert data["data"] == {
            "id": 1,
            "version": 10,
            "downloads": 5,
            "date": "2014-11-25T23:16:13Z",
        }

    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["downloads", "version", "1"])
        assert result.exit_code == 0
        assert "date: 2014-11-25T23:16:13Z" in result.output
        assert "counted" not in result.output

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "downloads", "version", "99"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "NOT_FOUND"
        assert data["error"]["message"] == "no row in version_downloads with id 99"


@pytest.mark.usefixtures("seeded")
class TestDownloadsCrate:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "downloads", "crate", "7"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "crate_download"
        assert data["data"]["crate_id"] == 2
        assert data["data"]["downloads"] == 40

    def test_not_found(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["downloads", "crate", "1"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output

    def test_non_integer_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["downloads", "crate", "abc"])
        assert result.exit_code == 2


class TestDownloadsWithoutDatabase:
    def test_reports_missing_database(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        result = cli_runner.invoke(cli, ["downloads", "version", "1"])
        assert result.exit_code == 1
        assert "NO_DATABASE" in result.output
        assert not (tmp_path / ".crateguard").exists()
