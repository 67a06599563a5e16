"""Deploy the bundled assets into a project directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import Target
from .errors import AlreadyExistsError, TemplateSyntaxError
from .store import AssetStore, output_name
from .template import TemplateRenderer
from .workspace import path_exists

__all__ = [
    "DOCKERFILE_ASSET",
    "PROTECTED_TEMPLATES",
    "ScaffoldDeployer",
    "ask_overwrite",
]


LOGGER = logging.getLogger(__name__)

DOCKERFILE_ASSET = "build/Dockerfile"
# Generated entry points are left alone once they exist.
PROTECTED_TEMPLATES = frozenset({"main.go.template"})

DIRECTORY_MODE = 0o755
FILE_MODE = 0o644


def ask_overwrite(root: Path, read: Callable[[str], str] = input) -> bool:
    """Ask the operator whether ``root`` may be overwritten.

    ``read`` prompts and returns one line of input; an ``EOFError`` declines.
    """

    try:
        answer = read(f"{root} already exists. Overwrite existing files? [y/n]: ")
    except EOFError:
        return False
    return answer.strip().lower() == "y"


def _write_bytes(path: Path, payload: bytes, mode: int) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(payload)


@dataclass(slots=True)
class ScaffoldDeployer:
    """Create the project tree and write plain and template assets into it."""

    store: AssetStore
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)
    confirm: Callable[[Path], bool] = ask_overwrite
    protected: frozenset[str] = PROTECTED_TEMPLATES

    def deploy_scaffold(self, root: str | Path) -> Path:
        """Create ``root/build`` and copy the plain assets into it.

        When ``root`` already exists the operator must confirm the overwrite,
        otherwise :class:`AlreadyExistsError` is raised before anything below
        ``root`` is touched.
        """

        root = Path(root)
        if path_exists(root) and not self.confirm(root):
            raise AlreadyExistsError(root)

        LOGGER.info("Boilerplating the project at: %s", root)

        build_dir = root / "build"
        build_dir.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)

        payload = self.store.get(DOCKERFILE_ASSET)
        _write_bytes(root / DOCKERFILE_ASSET, payload, FILE_MODE)
        return root

    def deploy_template(self, root: str | Path, name: str, target: Target) -> Path:
        """Render the template asset ``name`` to ``root`` without its suffix."""

        relative = output_name(name)
        try:
            body = self.store.get(name).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TemplateSyntaxError(f"body is not valid UTF-8: {exc}", name=name) from exc

        LOGGER.info("Creating new: %s", relative)
        rendered = self.renderer.render_string(body, target.context(), name=name)

        destination = Path(root) / relative
        destination.parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        destination.write_text(rendered, encoding="utf-8")
        return destination

    def deploy_templates(self, root: str | Path, target: Target) -> list[Path]:
        """Render every template asset in the store's enumeration order.

        Protected templates are skipped when their output already exists.
        """

        root = Path(root)
        written: list[Path] = []
        for name in self.store.template_names():
            if name in self.protected and path_exists(root / output_name(name)):
                LOGGER.debug("Keeping existing %s", output_name(name))
                continue
            written.append(self.deploy_template(root, name, target))
        return written
