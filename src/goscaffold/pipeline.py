"""End-to-end orchestration of a scaffolding run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .bootstrap import PostDeployInitializer
from .config import ScaffoldOptions
from .naming import validate_target
from .scaffold import ScaffoldDeployer
from .workspace import ensure_workspace, project_root

__all__ = ["ScaffoldPipeline"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScaffoldPipeline:
    """Validate, deploy and initialise a project in a single blocking run.

    Every step raises on failure and nothing is rolled back. Re-running is safe
    because each step is idempotent apart from the protected entry point,
    which is only ever created once.
    """

    deployer: ScaffoldDeployer
    initializer: PostDeployInitializer = field(default_factory=PostDeployInitializer)

    def run(self, options: ScaffoldOptions, environ: Mapping[str, str] | None = None) -> Path:
        target = options.target
        validate_target(target)

        workspace = ensure_workspace(environ, variable=options.workspace_variable)
        root = project_root(workspace, target)

        self.deployer.deploy_scaffold(root)
        self.deployer.deploy_templates(root, target)
        self.initializer.initialize(root)

        LOGGER.info("Done")
        return root
