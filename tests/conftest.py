from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tests.fixtures.commands import RecordingRunner

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from goscaffold.config import Target  # noqa: E402
from goscaffold.store import MappingAssetStore  # noqa: E402

ASSETS = {
    "build/Dockerfile": "FROM scratch\nADD app /app\n",
    "Makefile.template": "IMAGE := {{ repository }}/{{ namespace }}/{{ project }}\n",
    "README.md.template": "# {{ project }}\n\nEnv prefix: {{ project|upper }}\n",
    "main.go.template": "package main\n\n// {{ namespace|upper }}\nfunc main() {}\n",
}


@pytest.fixture()
def store() -> MappingAssetStore:
    return MappingAssetStore(ASSETS)


@pytest.fixture()
def target() -> Target:
    return Target(repository="github.com", namespace="acme", project="widget")


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "ws"
    (path / "src").mkdir(parents=True)
    return path


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()
