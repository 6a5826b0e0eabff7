"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, crateguard.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from crateguard.domain.naming import DEFAULT_MAX_NAME_LENGTH, CratesNamingPolicy

# --- crateguard.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: Path = Path(".crateguard") / "registry.db"


class NamingConfig(BaseModel):
    """[naming] section."""

    model_config = {"frozen": True}

    max_name_length: int = Field(default=DEFAULT_MAX_NAME_LENGTH, ge=1)

    def build_policy(self) -> CratesNamingPolicy:
        """Return the naming policy these settings describe."""
        return CratesNamingPolicy(max_name_length=self.max_name_length)


class CrateguardConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
