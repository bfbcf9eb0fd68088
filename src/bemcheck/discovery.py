"""Style-sheet discovery: recursive, suffix-filtered file enumeration."""

from __future__ import annotations

from pathlib import Path


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def find_stylesheets(root: str | Path, suffix: str) -> list[Path]:
    """Return every file under *root* whose name ends with *suffix*.

    Hidden files and anything inside hidden directories are skipped. The
    result is sorted so that reports are stable across runs.
    """
    root_path = Path(root)
    return sorted(
        path
        for path in root_path.rglob(f"*{suffix}")
        if path.is_file() and not _is_hidden(path, root_path)
    )
