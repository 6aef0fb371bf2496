"""Shared pytest configuration for the PetDoc reminder tests."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure the project root (which contains the ``petdoc`` package) and the
# shared ``fakes`` module are importable
TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
for path in (PROJECT_ROOT, TESTS_DIR):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SCHEDULER_ENABLED"] = "false"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)
os.environ.pop("DEPLOYMENT_MODE", None)


@pytest.fixture(autouse=True)
def reset_settings():
    """Reload settings from the environment around every test."""

    from petdoc.config import reset_settings_cache

    reset_settings_cache()
    yield
    reset_settings_cache()
