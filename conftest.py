"""Pytest configuration — ensures the project root is importable."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_spell_env(monkeypatch):
    """Keep SPELL_* variables from the developer's shell or .env out of tests."""
    for name in list(os.environ):
        if name.startswith("SPELL_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr("main.load_dotenv", lambda *args, **kwargs: False)
    yield
