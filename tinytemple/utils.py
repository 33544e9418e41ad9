"""Utility functions for TinyTemple.

Key functions:
    ensure_clean_dir: Ensure a directory exists and is empty.
    logical_name: Derive a template's logical name from its path.
    format_elapsed: Format a wall-clock duration for the final report.
"""

from __future__ import annotations

import shutil
from pathlib import Path


def ensure_clean_dir(path: Path) -> None:
    """Ensure a directory exists and is empty.

    If the directory exists, removes it with all its contents, then
    recreates it. Creates the directory if it doesn't exist. A symlink is
    replaced by a real directory; any other existing file is left alone.

    Args:
        path: Directory path to clean or create.

    Raises:
        NotADirectoryError: If the path is an existing non-directory file.
        OSError: If the directory cannot be removed or created.
    """
    if path.is_symlink():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        raise NotADirectoryError(f"Not a directory: {path}")
    path.mkdir(parents=True, exist_ok=True)


def logical_name(path: Path, root: Path, extension: str) -> str:
    """Return the logical name of a template file.

    The logical name is the path relative to ``root`` with POSIX separators
    and the template extension removed.

    Args:
        path: Path to the template file.
        root: Source directory the template was discovered in.
        extension: Template extension including the dot, e.g. ``.hbs``.

    Returns:
        Logical name such as ``blog/post``.

    Examples:
        >>> logical_name(Path("content/blog/post.hbs"), Path("content"), ".hbs")
        'blog/post'
    """
    rel = path.relative_to(root).as_posix()
    if extension and rel.endswith(extension):
        rel = rel[: -len(extension)]
    return rel


def format_elapsed(seconds: float) -> str:
    """Format a duration with two decimals and a fitting unit.

    Examples:
        >>> format_elapsed(1.5)
        '1.50s'

        >>> format_elapsed(0.0123)
        '12.30ms'
    """
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"
