"""Exceptions raised while creating a project.

Every error is fatal: the CLI reports the message and exits non-zero. Nothing
is retried and partially created projects are left as they are.
"""

from __future__ import annotations

from pathlib import Path

BASE_ERR = "Project creation failed. "


class ScaffoldError(Exception):
    """Base class for all project creation failures."""

    def __init__(self, *reasons: str) -> None:
        self.reasons = list(reasons)
        super().__init__(BASE_ERR + " ".join(reasons))


class PathNotFoundError(ScaffoldError):
    """A required source, template or project path does not exist."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        super().__init__(reason or f'"{path}" not found.')


class DestinationExistsError(ScaffoldError):
    """The app directory exists and ``force`` was not given."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'"app" directory already exists at "{path}"')


class OperationFailedError(ScaffoldError):
    """A file-system operation failed part-way through scaffolding."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"Step '{step}' failed: {message}")


class PluginInstallError(ScaffoldError):
    """The build plugin could not be registered with the project."""
