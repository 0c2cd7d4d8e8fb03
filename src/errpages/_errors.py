"""errpages error hierarchy.

All errpages-specific errors inherit from ErrorPagesError for easy catching.
"""

from __future__ import annotations

from pathlib import Path


class ErrorPagesError(Exception):
    """Base error for all errpages operations."""


class ConfigError(ErrorPagesError):
    """Invalid or missing configuration."""


class TemplateParseError(ErrorPagesError):
    """Template text is not valid template syntax."""

    def __init__(self, template: str, cause: BaseException) -> None:
        self.template = template
        self.cause = cause
        super().__init__(f"cannot parse template {template!r}: {cause}")


class NoTemplatesError(ErrorPagesError):
    """No templates are registered."""

    def __init__(self, msg: str = "no loaded templates") -> None:
        super().__init__(msg)


class RenderError(ErrorPagesError):
    """Rendering failed for a specific template/code pair."""

    def __init__(
        self, template: str, code: str | None, cause: BaseException
    ) -> None:
        self.template = template
        self.code = code
        self.cause = cause
        if code is None:
            msg = f"cannot render template {template!r}: {cause}"
        else:
            msg = f"cannot render page {code!r} with template {template!r}: {cause}"
        super().__init__(msg)


class DirectoryError(ErrorPagesError):
    """Path exists and is not a directory, or could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot prepare directory {str(path)!r}: {reason}")


class WriteError(ErrorPagesError):
    """Writing an output file failed."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {str(path)!r}: {cause}")
