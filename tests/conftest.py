"""Shared fixtures and marker auto-assignment by folder."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from jsimports import logger
from jsimports.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Callable

_DIRECTORY_MARKERS = ("unit", "integration", "end2end")


@pytest.fixture
def settings() -> Settings:
    """Settings with console logs, independent of the local `.env`."""
    return Settings(_env_file=None, log_json=False, log_level="INFO")


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing a source file below `tmp_path`."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    tests_root = (Path(config.rootpath) / "tests").resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(f"Could not resolve path for test item {item.name!s}; skipping marker assignment")
            continue

        for marker in _DIRECTORY_MARKERS:
            if tests_root / marker in (path, *path.parents):
                item.add_marker(getattr(pytest.mark, marker))
