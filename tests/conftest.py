"""Shared fixtures: real on-disk module trees for scanning tests."""

from __future__ import annotations

import importlib
import io
import sys
import textwrap
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from rich.console import Console

from gfind.console import GFIND_THEME


@pytest.fixture
def module_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[dict[str, str]], Path]]:
    """Write ``{"pkg/mod.py": source}`` files under tmp_path and make them importable.

    The written top-level packages are dropped from ``sys.modules`` afterwards.
    """
    top_level: set[str] = set()

    def write(files: dict[str, str]) -> Path:
        for relative, source in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(source))
            top_level.add(Path(relative).parts[0].removesuffix(".py"))
        monkeypatch.syspath_prepend(str(tmp_path))
        importlib.invalidate_caches()
        return tmp_path

    yield write

    for name in list(sys.modules):
        if name.split(".", 1)[0] in top_level:
            del sys.modules[name]


@pytest.fixture
def capture_console() -> Console:
    """A Rich console writing plain text into a buffer (read via ``.file.getvalue()``)."""
    return Console(file=io.StringIO(), theme=GFIND_THEME, width=200, color_system=None)
