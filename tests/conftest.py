"""Shared pytest fixtures and test helpers for crateguard tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from crateguard.config.settings import CrateguardSettings
from crateguard.infrastructure.database.engine import init_database
from crateguard.infrastructure.store import RegistryStore


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() side effects between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger("crateguard")
    our_level = ours.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(our_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings resolution."""
    monkeypatch.delenv("CRATEGUARD_CONFIG", raising=False)
    monkeypatch.delenv("CRATEGUARD_DATABASE__PATH", raising=False)
    monkeypatch.delenv("CRATEGUARD_NAMING__MAX_NAME_LENGTH", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "registry.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def settings(tmp_path: Path) -> CrateguardSettings:
    return CrateguardSettings.from_cli(root=tmp_path)


@pytest.fixture
def store(settings: CrateguardSettings, db_engine: Engine) -> Iterator[RegistryStore]:
    """Store wired to the temporary database."""
    s = RegistryStore(settings, engine=db_engine)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared payload builders
# ---------------------------------------------------------------------------


def make_dependency(**overrides: Any) -> dict[str, Any]:
    """A valid dependency record; keyword arguments replace fields."""
    dep: dict[str, Any] = {
        "optional": False,
        "default_features": True,
        "name": "serde",
        "features": ["derive"],
        "version_req": "^1.0",
        "target": None,
        "kind": "normal",
    }
    dep.update(overrides)
    return dep


def make_payload(**overrides: Any) -> dict[str, Any]:
    """A valid publish payload; keyword arguments replace fields."""
    payload: dict[str, Any] = {
        "name": "my_crate",
        "vers": "1.2.3",
        "deps": [],
        "features": {},
        "authors": [],
        "description": None,
        "homepage": None,
        "documentation": None,
        "readme": None,
        "keywords": ["cli", "tool"],
        "license": None,
        "license_file": None,
        "repository": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture(name="make_payload")
def _make_payload_fixture() -> Any:
    """Expose :func:`make_payload` to tests."""
    return make_payload


@pytest.fixture(name="make_dependency")
def _make_dependency_fixture() -> Any:
    """Expose :func:`make_dependency` to tests."""
    return make_dependency
