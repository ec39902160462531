# src/suitediff/files.py

"""
Resolves test-file glob patterns against an explicit workspace root.
"""

import glob
from pathlib import Path

import structlog

log = structlog.get_logger("files")


def enumerate_files(pattern: str, root: Path) -> list[Path]:
    """
    Returns the files matching `pattern` under `root`, sorted.

    Patterns are relative to the root and support `**` for any depth.
    Absolute patterns are used as given.
    """
    full_pattern = pattern if Path(pattern).is_absolute() else str(root / pattern)
    matches = sorted(
        Path(match) for match in glob.glob(full_pattern, recursive=True) if Path(match).is_file()
    )
    log.debug("Resolved test file pattern", pattern=pattern, root=str(root), matches=len(matches))
    return matches


def relative_path(file: Path, root: Path) -> str:
    """Root-relative POSIX path, or the path unchanged when outside the root."""
    try:
        return file.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return file.as_posix()

# 🧪⚙️
