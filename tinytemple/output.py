"""Output writing for TinyTemple.

Rendered templates are written to ``<outdir>/<name>.html``, mirroring the
template's location under the source directory.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from .errors import OutputDirError, OutputWriteError

OUTPUT_SUFFIX = ".html"


def output_path(output_dir: Path, name: str) -> Path:
    """Return the destination file for a logical template name."""
    return output_dir / f"{name}{OUTPUT_SUFFIX}"


def write_output(output_dir: Path, name: str, rendered: str) -> Path:
    """Write a rendered page to the output directory.

    Args:
        output_dir: Base output directory.
        name: Logical template name.
        rendered: Rendered HTML content.

    Returns:
        Path of the written file.

    Raises:
        OutputDirError: If the parent directory cannot be created.
        OutputWriteError: If the file cannot be created or written.
    """
    target = output_path(output_dir, name)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirError(
            target.parent, "Unable to create output subdirectory.", exc
        ) from exc
    try:
        with open(target, "w", encoding="utf-8") as f:
            f.write(rendered)
    except OSError as exc:
        raise OutputWriteError(target, "Error writing to output file.", exc) from exc
    logger.debug("Wrote {}", target)
    return target
