"""
Pytest config.

Tests import the local `connector/` package straight from the repo root. When a global
`pytest` entrypoint is used without an editable install, the repo root is not reliably on
sys.path during collection, so we pin it here.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_ensure_repo_root_on_syspath()


@pytest.fixture(autouse=True)
def _isolate_endorsement_config(monkeypatch: pytest.MonkeyPatch):
    """
    `load_endorsement_config` is lru_cached and env-driven.

    Start every test from a clean environment and an empty cache so a bypass enabled in
    one test can never leak into another.
    """
    from connector.auth.config import load_endorsement_config

    monkeypatch.delenv("ALLOW_UNENDORSED_CHANNELS", raising=False)
    monkeypatch.delenv("CONNECTOR_ENVIRONMENT", raising=False)
    load_endorsement_config.cache_clear()
    yield
    load_endorsement_config.cache_clear()
