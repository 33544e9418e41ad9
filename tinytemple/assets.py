"""Static asset copying for TinyTemple.

After every template has been rendered, the contents of the static directory
are merged into the output directory. Existing directories are reused, but an
existing file is never overwritten: a name collision with a rendered page
means the site is misconfigured and fails the build.

Key components:
- StaticCopier: Copies the static tree into the output directory.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from loguru import logger

from .errors import StaticCopyError


class StaticCopier:
    """Copies static files verbatim into the output directory.

    Attributes:
        static_dir (Path): Directory containing static files.
        output_dir (Path): Directory where files are copied to.
    """

    def __init__(self, static_dir: Path, output_dir: Path):
        """Initialize the copier.

        Args:
            static_dir: Directory whose contents are copied.
            output_dir: Destination directory.
        """
        self.static_dir = static_dir
        self.output_dir = output_dir

    def run(self) -> list[Path]:
        """Copy the static tree into the output directory.

        Returns:
            Destination paths of the copied files.

        Raises:
            StaticCopyError: If the static directory is missing, a destination
                file already exists, or any copy fails.
        """
        if not self.static_dir.is_dir():
            raise StaticCopyError(
                self.static_dir,
                "Unable to copy static files to output.",
                FileNotFoundError(f"No such directory: {self.static_dir}"),
            )

        copied: list[Path] = []
        try:
            for item in sorted(self.static_dir.rglob("*")):
                rel = item.relative_to(self.static_dir)
                dest = self.output_dir / rel
                if item.is_dir():
                    dest.mkdir(parents=True, exist_ok=True)
                    continue
                if dest.exists():
                    raise FileExistsError(f"Path already exists: {dest}")
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(item, dest)
                logger.debug("Copied {} -> {}", item, dest)
                copied.append(dest)
        except OSError as exc:
            raise StaticCopyError(
                self.static_dir, "Unable to copy static files to output.", exc
            ) from exc
        return copied
