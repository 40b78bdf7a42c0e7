"""Safe file helpers for pluglog.

Reading helpers never raise: missing or unreadable files return defaults,
so callers decide how to report the problem.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def ensure_parent_dir(path: Path | str) -> Path:
    """Ensure the parent directory of a path exists.

    Args:
        path: File path whose parent directory should be created.

    Returns:
        The path as a Path object.

    Raises:
        OSError: If the directory cannot be created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def read_file(path: Path | str, default: str | None = None) -> str | None:
    """Read a file's contents, returning default if missing or unreadable.

    Args:
        path: Path to the file to read.
        default: Value to return if file doesn't exist or can't be read.

    Returns:
        File contents as string, or default if file is missing/unreadable.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (FileNotFoundError, PermissionError, OSError, UnicodeDecodeError):
        return default


def read_json(path: Path | str, default: Any = None) -> Any:
    """Read and parse a JSON file, returning default on any error.

    Args:
        path: Path to the JSON file.
        default: Value to return if file is missing or JSON is invalid.

    Returns:
        Parsed JSON data, or default on any error.
    """
    content = read_file(path)
    if content is None:
        return default
    try:
        return json.loads(content)
    except (json.JSONDecodeError, ValueError):
        return default
