from __future__ import annotations

import glob
from pathlib import Path
from typing import List

IGNORE_DIRS = {
    ".git",
    ".venv",
    "__pycache__",
    "dist",
    "build",
    "node_modules",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
}


def expand_pattern(pattern: str, root: Path) -> List[Path]:
    """Return the files matched by a recursive glob, relative to ``root``."""
    matches: List[Path] = []
    for match in glob.glob(pattern, root_dir=root, recursive=True):
        path = Path(match)
        if any(part in IGNORE_DIRS for part in path.parts):
            continue
        if (root / path).is_file():
            matches.append(path)
    return sorted(matches)


def project_dir(project: str, root: Path) -> Path:
    path = root / project
    return path if path.is_dir() else path.parent


def relative_path(filename: str, root: Path) -> str:
    """Express an analyzer-reported path the way GitHub names changed files."""
    path = Path(filename)
    if not path.is_absolute():
        path = root / path
    try:
        return path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        return Path(filename).as_posix()
