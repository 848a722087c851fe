"""Unit tests for the filesystem run lock."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.errors import EventLoadLockError
from ingest.run_lock import RunLock


def test_second_acquire_without_release_fails(tmp_path: Path) -> None:
    """Only the first acquisition should succeed."""
    lock = RunLock(tmp_path / "LOCKFILE")

    assert lock.try_acquire() is True
    assert lock.try_acquire() is False


def test_separate_instances_share_the_marker(tmp_path: Path) -> None:
    """Exclusion works across lock objects, as across processes."""
    first = RunLock(tmp_path / "LOCKFILE")
    second = RunLock(tmp_path / "LOCKFILE")
    first.try_acquire()

    assert second.is_held() and second.try_acquire() is False


def test_release_allows_reacquire(tmp_path: Path) -> None:
    """Releasing removes the marker so the next run can proceed."""
    lock = RunLock(tmp_path / "LOCKFILE")
    lock.try_acquire()

    lock.release()

    assert lock.is_held() is False
    assert lock.try_acquire() is True


def test_release_without_marker_is_noop(tmp_path: Path) -> None:
    """Releasing an absent lock does not raise."""
    lock = RunLock(tmp_path / "LOCKFILE")

    lock.release()

    assert not lock.path.exists()


def test_describe_reports_holder_pid(tmp_path: Path) -> None:
    """The marker records the holding process for operators."""
    lock = RunLock(tmp_path / "LOCKFILE")
    assert lock.describe() is None

    lock.try_acquire()

    assert f"pid={os.getpid()}" in str(lock.describe())


def test_try_acquire_raises_when_directory_missing(tmp_path: Path) -> None:
    """An unwritable marker location is an error, not contention."""
    lock = RunLock(tmp_path / "missing" / "LOCKFILE")

    with pytest.raises(EventLoadLockError):
        lock.try_acquire()
