"""Template discovery and rendering for TinyTemple.

This module uses Jinja2 to compile and render the site's templates. Every
file under the source directory carrying the template extension is a page;
its logical name is its relative path without that extension.

Key class:
- TemplateRegistry: Discovers, compiles and renders templates.

Escaping is disabled on the environment: the ``content`` value is already
HTML and must be inserted verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateSyntaxError,
    Undefined,
)
from loguru import logger

from .errors import ParseTemplatesError, RenderError, SourceUnreadableError
from .utils import logical_name

DEFAULT_TEMPLATE_EXTENSION = ".hbs"

# Editor backups and dotfiles are never registered as templates.
HIDDEN_PREFIXES = (".", "#")


def _format_error_message(exc: Exception) -> str:
    """Format an exception into a user-friendly error message.

    Args:
        exc: The exception to format.

    Returns:
        A human-readable error message.
    """
    error_type = type(exc).__name__
    error_msg = str(exc)

    if error_type == "UndefinedError":
        return f"Undefined variable: {error_msg}"
    if isinstance(exc, TemplateSyntaxError):
        return f"Template syntax error on line {exc.lineno}: {exc.message}"
    if error_type == "TypeError":
        return f"Type error: {error_msg}"
    if error_type == "AttributeError":
        return f"Attribute error: {error_msg}"

    return f"{error_type}: {error_msg}"


class TemplateRegistry:
    """Registry of compiled templates keyed by logical name.

    Attributes:
        source_dir: Directory containing templates.
        extension: Template file extension, including the leading dot.
        env: Jinja2 environment.
        templates: Mapping of logical name to compiled template.
        paths: Mapping of logical name to template file path.
    """

    def __init__(
        self,
        source_dir: Path,
        extension: str = DEFAULT_TEMPLATE_EXTENSION,
        strict: bool = False,
    ):
        """Initialize the registry.

        Args:
            source_dir: Directory with templates.
            extension: Template file extension.
            strict: Treat undefined variables as render errors.
        """
        self.source_dir = source_dir
        self.extension = extension if extension.startswith(".") else f".{extension}"
        self.env = Environment(
            loader=FileSystemLoader(str(source_dir)),
            autoescape=False,
            undefined=StrictUndefined if strict else Undefined,
            keep_trailing_newline=True,
        )
        self.templates: dict[str, Template] = {}
        self.paths: dict[str, Path] = {}

    def validate(self) -> None:
        """Check that the source directory can be listed.

        Raises:
            SourceUnreadableError: If the directory is missing or unreadable.
        """
        try:
            next(iter(self.source_dir.iterdir()), None)
        except OSError as exc:
            raise SourceUnreadableError(
                self.source_dir, "Unable to read input directory.", exc
            ) from exc

    def discover(self) -> dict[str, Path]:
        """Find every template file under the source directory.

        Files whose name starts with "." or "#" are skipped.

        Returns:
            Mapping of logical name to template path, sorted by name.

        Raises:
            SourceUnreadableError: If the source directory cannot be listed.
        """
        self.validate()
        found: dict[str, Path] = {}
        try:
            for path in self.source_dir.rglob(f"*{self.extension}"):
                if path.is_file() and not path.name.startswith(HIDDEN_PREFIXES):
                    found[logical_name(path, self.source_dir, self.extension)] = path
        except OSError as exc:
            raise SourceUnreadableError(
                self.source_dir, "Unable to read input directory.", exc
            ) from exc
        return dict(sorted(found.items()))

    def load(self) -> dict[str, Template]:
        """Discover and compile all templates.

        A single broken template fails the whole set.

        Returns:
            Mapping of logical name to compiled template.

        Raises:
            SourceUnreadableError: If the source directory cannot be listed.
            ParseTemplatesError: If any template fails to load or compile.
        """
        self.paths = self.discover()
        templates: dict[str, Template] = {}
        for name, path in self.paths.items():
            rel = path.relative_to(self.source_dir).as_posix()
            try:
                templates[name] = self.env.get_template(rel)
            except TemplateSyntaxError as exc:
                raise ParseTemplatesError(
                    path,
                    f"Unable to parse input templates. {_format_error_message(exc)}",
                    exc,
                ) from exc
            except (OSError, UnicodeDecodeError) as exc:
                raise ParseTemplatesError(
                    path, "Unable to parse input templates.", exc
                ) from exc
        self.templates = templates
        logger.debug("Loaded {} templates from {}", len(templates), self.source_dir)
        return templates

    @property
    def names(self) -> list[str]:
        """Logical names of the loaded templates, in sorted order."""
        return sorted(self.templates)

    def path_for(self, name: str) -> Path:
        """Return the source path of a loaded template."""
        return self.paths[name]

    def render(self, name: str, context: dict[str, Any]) -> str:
        """Render a template against a context.

        Args:
            name: Logical template name.
            context: Variables to make available in the template.

        Returns:
            Rendered string.

        Raises:
            RenderError: If expansion fails for any reason.
        """
        try:
            return self.templates[name].render(context)
        except Exception as exc:
            raise RenderError(
                self.paths.get(name, self.source_dir / name),
                f"Error rendering template. {_format_error_message(exc)}",
                exc,
            ) from exc
