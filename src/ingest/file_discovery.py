"""Intake file discovery."""

from __future__ import annotations

from pathlib import Path


def discover_input_files(intake_dir: Path, file_extension: str) -> list[Path]:
    """List intake files with the configured extension.

    A missing intake directory is a normal "nothing to do" outcome.

    Args:
        intake_dir: Directory polled for new files.
        file_extension: Suffix to match, including the dot.

    Returns:
        Matching regular files sorted by name.
    """
    if not intake_dir.is_dir():
        return []
    return sorted(
        file_path
        for file_path in intake_dir.iterdir()
        if file_path.is_file()
        and file_path.name.endswith(file_extension)
        and not file_path.name.startswith(".")
    )
