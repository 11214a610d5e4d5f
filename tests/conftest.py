"""Pytest fixtures for patternkit tests"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# =============================================================================
# Global Test Setup
# =============================================================================

# Add src to Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from patternkit.singleton.guard import SingletonGuard  # noqa: E402
from patternkit.strategies.routing import create_default_router  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment variables out of config tests"""
    for key in (
        "PATTERNKIT_LOG_FILE",
        "PATTERNKIT_LOG_LEVEL",
        "PATTERNKIT_STRATEGY_INPUT_SIZE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def log_file(tmp_path) -> Path:
    """Log path inside a directory that does not exist yet"""
    return tmp_path / "logs" / "application.log"


@pytest.fixture
def console() -> Console:
    """Console writing plain text to memory; read with console.file.getvalue()"""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def guard(log_file, console):
    """Fresh singleton guard whose sink is released after the test"""
    singleton_guard = SingletonGuard(log_file, console=console)
    yield singleton_guard
    singleton_guard.release()


@pytest.fixture
def router():
    return create_default_router()
