"""Unit tests for the example scripts."""

from __future__ import annotations

import importlib.util
import logging
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pytest

_EXAMPLES_DIR = Path(__file__).resolve().parents[2] / "examples"


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _load_example(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, _EXAMPLES_DIR / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_basic_usage_reports_totals_before_and_after_substitution(
    isolated_env: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    basic_usage = _load_example("basic_usage")
    saved = isolated_env / "cake.json"

    assert basic_usage.main(["--save", str(saved)]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Make Cake (9.50)"
    assert "Without frosting: 7.50" in out
    assert "With icing sugar instead: 8.00" in out
    assert saved.exists()
