"""Marker-gated external setup commands run after the scaffold is deployed."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

from .errors import ExternalCommandFailedError
from .workspace import path_exists

__all__ = ["DEFAULT_STEPS", "InitStep", "PostDeployInitializer"]


LOGGER = logging.getLogger(__name__)

CommandRunner = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class InitStep:
    """Run ``command`` inside the project unless ``marker`` already exists."""

    description: str
    marker: tuple[str, ...]
    command: tuple[str, ...]

    def marker_path(self, root: Path) -> Path:
        return root.joinpath(*self.marker)


DEFAULT_STEPS: tuple[InitStep, ...] = (
    InitStep("Initializing git repo", marker=(".git",), command=("git", "init")),
    InitStep("Initializing godeps", marker=("Godeps", "_workspace"), command=("make", "godep")),
)


@dataclass(slots=True)
class PostDeployInitializer:
    """Initialise version control and the vendored dependency workspace."""

    verbose: bool = False
    steps: Sequence[InitStep] = DEFAULT_STEPS
    runner: CommandRunner = field(default=subprocess.run)

    def initialize(self, root: str | Path) -> list[InitStep]:
        """Run each step whose marker is absent and return the steps executed.

        The first failing command raises :class:`ExternalCommandFailedError`
        and later steps are not attempted.
        """

        root = Path(root)
        executed: list[InitStep] = []
        for step in self.steps:
            if path_exists(step.marker_path(root)):
                LOGGER.debug("Skipping '%s': %s exists", " ".join(step.command), step.marker_path(root))
                continue
            LOGGER.info(step.description)
            self._run(step.command, root)
            executed.append(step)
        return executed

    def _run(self, command: Sequence[str], cwd: Path) -> None:
        stream = None if self.verbose else subprocess.DEVNULL
        LOGGER.debug("Running %s in %s", " ".join(command), cwd)
        try:
            self.runner(list(command), cwd=cwd, stdout=stream, stderr=stream, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ExternalCommandFailedError(command, exc) from exc
