"""Exception types raised by the goscaffold deployment pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "AlreadyExistsError",
    "AssetMissingError",
    "ExternalCommandFailedError",
    "InvalidNameError",
    "MissingWorkspaceError",
    "ScaffoldError",
    "TemplateRenderingError",
    "TemplateSyntaxError",
    "WorkspaceNotFoundError",
]


class ScaffoldError(RuntimeError):
    """Base class for every error that aborts a scaffolding run."""


class MissingWorkspaceError(ScaffoldError):
    """Raised when the workspace environment variable is unset or empty."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"${variable} is not set")


class WorkspaceNotFoundError(ScaffoldError):
    """Raised when the configured workspace root does not exist."""

    def __init__(self, variable: str, path: Path) -> None:
        self.variable = variable
        self.path = path
        super().__init__(f"{variable} does not exist at: {path}")


class InvalidNameError(ScaffoldError):
    """Raised when a target coordinate violates the naming policy."""

    def __init__(self, field: str, value: str, allowed: str) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(f"invalid {field} name '{value}'. Only {allowed} are allowed.")


class AlreadyExistsError(ScaffoldError):
    """Raised when the operator does not confirm overwriting ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} already exists")


class AssetMissingError(ScaffoldError):
    """Raised when the asset store has no entry for ``name``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"asset '{name}' not found")


class TemplateRenderingError(ScaffoldError):
    """Raised when the renderer cannot evaluate a placeholder."""


class TemplateSyntaxError(TemplateRenderingError):
    """Raised when a template body cannot be parsed."""

    def __init__(self, message: str, *, name: str | None = None, line: int | None = None) -> None:
        self.name = name
        self.line = line
        location = name or "<template>"
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {message}")


class ExternalCommandFailedError(ScaffoldError):
    """Raised when an external setup command cannot be launched or fails."""

    def __init__(self, command: Sequence[str], cause: BaseException) -> None:
        self.command = tuple(command)
        self.cause = cause
        super().__init__(f"command '{' '.join(self.command)}' failed: {cause}")
