"""Markdown rendering for TinyTemple.

Content files are converted with mistune using a full-featured dialect.
The HTML renderer is created with ``escape=False`` so raw HTML written in a
content file passes through untouched, and the result is inserted into
templates verbatim.

Key classes:
- MarkdownRenderer: Renders Markdown to HTML.
"""

from __future__ import annotations

import mistune

# Extensions enabled for every content file.
MARKDOWN_PLUGINS = [
    "strikethrough",
    "footnotes",
    "table",
    "url",
    "task_lists",
    "def_list",
    "abbr",
    "mark",
    "insert",
    "superscript",
    "subscript",
    "math",
]


class MarkdownRenderer:
    """Renders Markdown content to HTML.

    The mistune parser is built once and reused for every content file.
    """

    def __init__(self, plugins: list[str] | None = None):
        """Initialize the renderer.

        Args:
            plugins: mistune plugin names. Defaults to MARKDOWN_PLUGINS.
        """
        self.plugins = list(plugins if plugins is not None else MARKDOWN_PLUGINS)
        self._markdown = mistune.create_markdown(
            escape=False,
            renderer="html",
            plugins=self.plugins,
        )

    def render(self, content: str) -> str:
        """Render Markdown content to HTML.

        Args:
            content: Markdown source content.

        Returns:
            Rendered HTML.
        """
        return self._markdown(content)
