"""Error taxonomy for TinyTemple builds.

Every failure raised by the pipeline is a TempleError carrying the path it
concerns, a human-readable message and the original exception. Errors come in
two variants:

- FatalError: aborts the whole build (config, source dir, output reset,
  template parsing, static copy).
- RecoverableError: affects a single template; the build logs it and moves
  on to the next template.

The dispatch() function is the single place that decides between the two.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger


class TempleError(Exception):
    """Error during a build with file context.

    Attributes:
        path: Path to the file or directory that caused the error.
        message: Human-readable error message.
        cause: The original exception that was caught.
    """

    def __init__(
        self,
        path: Path,
        message: str,
        cause: Exception | None = None,
    ):
        self.path = path
        self.message = message
        self.cause = cause
        super().__init__(f"{path}: {message}")


class FatalError(TempleError):
    """An error that terminates the build."""


class RecoverableError(TempleError):
    """An error that only skips the current template."""


class ConfigReadError(FatalError):
    pass


class ConfigParseError(FatalError):
    pass


class SourceUnreadableError(FatalError):
    pass


class OutputResetError(FatalError):
    pass


class ParseTemplatesError(FatalError):
    pass


class StaticCopyError(FatalError):
    pass


class ContentReadError(RecoverableError):
    pass


class RenderError(RecoverableError):
    pass


class OutputDirError(RecoverableError):
    pass


class OutputWriteError(RecoverableError):
    pass


def dispatch(error: TempleError, template: str | None = None) -> None:
    """Log a build error and decide whether the build may continue.

    Recoverable errors are logged and swallowed so the caller can proceed
    with the next template. Fatal errors are logged and re-raised.

    Args:
        error: The error to report.
        template: Logical name of the template being processed, if any.

    Raises:
        FatalError: If the error is fatal.
    """
    bound = logger.bind(
        path=str(error.path),
        error=str(error.cause) if error.cause is not None else "",
    )
    if template is not None:
        bound = bound.bind(template=template)
    bound.error(error.message)
    if isinstance(error, FatalError):
        raise error
