"""Site building functionality for TinyTemple.

This module contains the core logic for building a static site from source
files. The pipeline runs in fixed order:

1. Load the site configuration (fatal on failure).
2. Validate the source directory (fatal).
3. Wipe and recreate the output directory (fatal).
4. Compile every template (fatal).
5. Render each template with its optional Markdown content and write it out.
   Failures here only skip the affected template.
6. Copy the static directory into the output directory (fatal).

Key functions:
- build_site: Main function to build the entire site.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from .assets import StaticCopier
from .config import DEFAULT_CONFIG_PATH, load_config
from .content import ContentResolver
from .errors import OutputResetError, RecoverableError, TempleError, dispatch
from .output import write_output
from .templates import DEFAULT_TEMPLATE_EXTENSION, TemplateRegistry
from .utils import ensure_clean_dir

DEFAULT_SOURCE_DIR = Path("./content/")
DEFAULT_STATIC_DIR = Path("./static/")
DEFAULT_OUTPUT_DIR = Path("./html/")


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        output_dir: Directory where the site was built.
        rendered: Logical names of the templates that were written.
        failed: Logical names of the templates skipped after an error.
        static_files: Files copied from the static directory.
        elapsed: Wall-clock duration of the build in seconds.
    """

    output_dir: Path
    rendered: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    static_files: list[Path] = field(default_factory=list)
    elapsed: float = 0.0


def build_site(
    source_dir: Path = DEFAULT_SOURCE_DIR,
    static_dir: Path = DEFAULT_STATIC_DIR,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    config_path: Path = DEFAULT_CONFIG_PATH,
    template_extension: str = DEFAULT_TEMPLATE_EXTENSION,
    strict: bool = False,
) -> BuildResult:
    """Build the entire static site.

    Args:
        source_dir: Directory with templates and Markdown content files.
        static_dir: Directory whose contents are copied verbatim.
        output_dir: Directory for rendered HTML. Wiped on every build.
        config_path: Site configuration file.
        template_extension: Extension identifying template files.
        strict: Treat undefined template variables as errors.

    Returns:
        BuildResult describing the written pages.

    Raises:
        FatalError: If any pipeline gate fails. The error has been logged.
    """
    started = time.perf_counter()
    result = BuildResult(output_dir=output_dir)
    registry = TemplateRegistry(source_dir, template_extension, strict=strict)
    resolver = ContentResolver(source_dir)

    try:
        base_context = load_config(config_path)
        registry.validate()
        _reset_output(output_dir)
        registry.load()
    except TempleError as exc:
        dispatch(exc)

    for name in registry.names:
        try:
            _render_one(registry, resolver, base_context, output_dir, name)
        except RecoverableError as exc:
            dispatch(exc, template=name)
            result.failed.append(name)
        else:
            result.rendered.append(name)

    try:
        result.static_files = StaticCopier(static_dir, output_dir).run()
    except TempleError as exc:
        dispatch(exc)

    result.elapsed = time.perf_counter() - started
    logger.info(
        "Rendered {} templates ({} failed) into {}",
        len(result.rendered),
        len(result.failed),
        output_dir,
    )
    return result


def _reset_output(output_dir: Path) -> None:
    try:
        ensure_clean_dir(output_dir)
    except OSError as exc:
        raise OutputResetError(
            output_dir, "Unable to clear output directory.", exc
        ) from exc


def _render_one(
    registry: TemplateRegistry,
    resolver: ContentResolver,
    base_context: dict,
    output_dir: Path,
    name: str,
) -> None:
    """Render a single template and write it to the output directory."""
    logger.debug("Rendering template {}", name)
    context = resolver.context_for(base_context, name)
    rendered = registry.render(name, context)
    write_output(output_dir, name, rendered)
