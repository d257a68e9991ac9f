"""Shared pytest fixtures for rbkit tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_rbkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``RBKIT_*`` variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("RBKIT_"):
            monkeypatch.delenv(name, raising=False)
