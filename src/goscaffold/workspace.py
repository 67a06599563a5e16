"""Resolve the workspace root and the destination directory of a target."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from .config import DEFAULT_WORKSPACE_VARIABLE, Target
from .errors import MissingWorkspaceError, WorkspaceNotFoundError

__all__ = ["ensure_workspace", "path_exists", "project_root"]


LOGGER = logging.getLogger(__name__)


def path_exists(path: str | Path) -> bool:
    """Return whether ``path`` exists.

    Only a missing entry maps to ``False``; permission problems and other
    ``OSError`` failures propagate to the caller.
    """

    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def ensure_workspace(
    environ: Mapping[str, str] | None = None,
    *,
    variable: str = DEFAULT_WORKSPACE_VARIABLE,
) -> Path:
    """Return the workspace root named by ``variable``.

    Raises :class:`MissingWorkspaceError` when the variable is unset or empty
    and :class:`WorkspaceNotFoundError` when it points to a missing path.
    """

    if environ is None:
        environ = os.environ

    value = environ.get(variable, "")
    if not value:
        raise MissingWorkspaceError(variable)

    workspace = Path(value)
    if not path_exists(workspace):
        raise WorkspaceNotFoundError(variable, workspace)

    LOGGER.info("%s is: %s", variable, workspace)
    return workspace


def project_root(workspace: str | Path, target: Target) -> Path:
    """Return ``workspace/src/<repository>/<namespace>/<project>``."""

    return Path(workspace) / "src" / target.repository / target.namespace / target.project
