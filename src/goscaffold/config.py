"""Configuration values shared by the pipeline and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_WORKSPACE_VARIABLE", "ScaffoldOptions", "Target"]


DEFAULT_WORKSPACE_VARIABLE = "GOPATH"


class Target(BaseModel):
    """Coordinates of the Go project being scaffolded.

    The naming policy is enforced by :func:`goscaffold.naming.validate_target`
    rather than at construction time so that interactive input can be reported
    field by field.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    repository: str = Field(..., description="Source control host, e.g. github.com.")
    namespace: str = Field(..., description="Organisation or group in the repository, e.g. zulily.")
    project: str = Field(..., description="Name of the binary or package, e.g. fizzbuzz.")

    def context(self) -> Mapping[str, str]:
        """Return the substitution variables exposed to templates."""

        return {
            "repository": self.repository,
            "namespace": self.namespace,
            "project": self.project,
        }


@dataclass(frozen=True, slots=True)
class ScaffoldOptions:
    """Immutable run configuration built once by the command line front end.

    Attributes
    ----------
    target:
        The coordinates of the project to create.
    verbose:
        When ``True`` the output of external setup commands is forwarded to
        the terminal and debug logging is enabled.
    workspace_variable:
        Name of the environment variable holding the workspace root.
    """

    target: Target
    verbose: bool = False
    workspace_variable: str = DEFAULT_WORKSPACE_VARIABLE
