"""Deployment profiles that select the reminder cadence."""

from __future__ import annotations

from enum import Enum

_ALIASES = {
    "prod": "production",
    "dev": "development",
}


class DeploymentMode(str, Enum):
    """Environment profile the process runs under."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"

    @classmethod
    def parse(cls, value: str) -> "DeploymentMode":
        """Return the mode for ``value`` accepting the short ``prod``/``dev`` names."""

        normalized = value.strip().lower()
        return cls(_ALIASES.get(normalized, normalized))


__all__ = ["DeploymentMode"]
