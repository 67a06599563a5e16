"""Boilerplate new Go projects inside a ``$GOPATH`` workspace.

The package validates the project coordinates, creates
``$GOPATH/src/<repository>/<namespace>/<project>``, deploys a bundled set of
plain and templated files into it and runs ``git init`` and ``make godep``
where they have not been run before. Every step is usable programmatically
and through the ``goscaffold`` command line interface.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .bootstrap import InitStep, PostDeployInitializer
from .config import ScaffoldOptions, Target
from .errors import (
    AlreadyExistsError,
    AssetMissingError,
    ExternalCommandFailedError,
    InvalidNameError,
    MissingWorkspaceError,
    ScaffoldError,
    TemplateRenderingError,
    TemplateSyntaxError,
    WorkspaceNotFoundError,
)
from .naming import is_valid_name, validate_target
from .pipeline import ScaffoldPipeline
from .scaffold import ScaffoldDeployer
from .store import AssetStore, BundledAssetStore, MappingAssetStore
from .template import TemplateRenderer
from .workspace import ensure_workspace, project_root

__all__ = [
    "AlreadyExistsError",
    "AssetMissingError",
    "AssetStore",
    "BundledAssetStore",
    "ExternalCommandFailedError",
    "InitStep",
    "InvalidNameError",
    "MappingAssetStore",
    "MissingWorkspaceError",
    "PostDeployInitializer",
    "ScaffoldDeployer",
    "ScaffoldError",
    "ScaffoldOptions",
    "ScaffoldPipeline",
    "Target",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateSyntaxError",
    "WorkspaceNotFoundError",
    "ensure_workspace",
    "is_valid_name",
    "project_root",
    "validate_target",
]
