"""Content resolution for TinyTemple.

A template named ``blog/post`` may be paired with a Markdown file at
``<sourcedir>/blog/post.md``. When present, the file is rendered to HTML and
exposed to the template under the reserved ``content`` key.

Key classes:
- ContentResolver: Finds, reads and renders content files, and builds the
  per-template render context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger

from .errors import ContentReadError, dispatch
from .renderers import MarkdownRenderer

CONTENT_KEY = "content"
CONTENT_SUFFIX = ".md"


class ContentResolver:
    """Resolves the optional Markdown content of each template.

    Attributes:
        source_dir: Directory holding templates and content files.
        renderer: Markdown renderer used for conversion.
    """

    def __init__(self, source_dir: Path, renderer: MarkdownRenderer | None = None):
        self.source_dir = source_dir
        self.renderer = renderer or MarkdownRenderer()

    def content_path(self, name: str) -> Path:
        """Return the candidate Markdown path for a template name."""
        return self.source_dir / f"{name}{CONTENT_SUFFIX}"

    def resolve(self, name: str) -> str | None:
        """Render the content file matching a template, if there is one.

        Args:
            name: Logical template name.

        Returns:
            Rendered HTML, or None if no content file exists.

        Raises:
            ContentReadError: If the content file exists but cannot be read.
        """
        path = self.content_path(name)
        if not path.exists():
            return None
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContentReadError(path, "Unable to read content file.", exc) from exc
        logger.debug("Rendering content file {}", path)
        return self.renderer.render(raw)

    def context_for(self, base: dict[str, Any], name: str) -> dict[str, Any]:
        """Build the render context for one template.

        The base mapping is never modified. The returned snapshot holds a
        ``content`` entry only when the template has a readable content file.

        Args:
            base: Context loaded from the site configuration.
            name: Logical template name.

        Returns:
            A fresh context dictionary.
        """
        context = {key: value for key, value in base.items() if key != CONTENT_KEY}
        try:
            html = self.resolve(name)
        except ContentReadError as exc:
            dispatch(exc, template=name)
            html = None
        if html is not None:
            context[CONTENT_KEY] = html
        return context
