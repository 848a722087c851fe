"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

EVENT_HEADER = "eventDatetime,eventAction,callRef,eventValue,eventCurrencyCode"


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def fixtures_root() -> Path:
    """Absolute path of tests/fixtures."""
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def event_config(tmp_path: Path):
    """Config rooted at tmp_path with syslog disabled."""
    from core.config import build_config

    return build_config({"base_dir": str(tmp_path), "syslog": "false"})


@pytest.fixture
def write_intake_file(event_config) -> Callable[..., Path]:
    """Write an event file into the intake directory of ``event_config``."""

    def _write(name: str, rows: list[str], header: str = EVENT_HEADER) -> Path:
        event_config.intake_dir.mkdir(parents=True, exist_ok=True)
        file_path = event_config.intake_dir / name
        file_path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return file_path

    return _write
