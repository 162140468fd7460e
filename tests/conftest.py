"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from composite_tasks.tree.model import CompositeTask
from composite_tasks.tree.recipes import make_cake

_SETTINGS_ENV_VARS = ("LOG_LEVEL", "TASK_TREE_PATH", "DURATION_PRECISION")


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working directory with no settings in the environment."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cake() -> CompositeTask:
    """Provide a fresh "Make Cake" tree."""
    return make_cake()
