from __future__ import annotations

import logging
from pathlib import Path

import pytest

from goscaffold import __version__, cli
from goscaffold.bootstrap import PostDeployInitializer
from goscaffold.cli import build_parser, main
from goscaffold.store import MappingAssetStore
from tests.fixtures.commands import RecordingRunner


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def fake_commands(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    runner = RecordingRunner()

    def initializer(verbose: bool = False) -> PostDeployInitializer:
        return PostDeployInitializer(verbose=verbose, runner=runner)

    monkeypatch.setattr(cli, "PostDeployInitializer", initializer)
    return runner


class ScriptedInput:
    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.repository, args.namespace, args.project, args.verbose) == ("", "", "", False)


def test_version_flag(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_cli_creates_project_from_flags(
    monkeypatch: pytest.MonkeyPatch,
    workspace: Path,
    fake_commands: RecordingRunner,
    capsys: pytest.CaptureFixture[str],
):
    monkeypatch.setenv("GOPATH", str(workspace))
    read = ScriptedInput()

    exit_code = main(["--repository", "github.com", "--namespace", "acme", "--project", "widget"], read=read)

    root = workspace / "src" / "github.com" / "acme" / "widget"
    assert exit_code == 0
    assert read.prompts == []
    assert (root / "build" / "Dockerfile").is_file()
    assert (root / "Makefile").is_file()
    assert "widget" in (root / "main.go").read_text(encoding="utf-8")
    assert fake_commands.commands == [["git", "init"], ["make", "godep"]]

    out = capsys.readouterr().out
    assert f"GOPATH is: {workspace}" in out
    assert "Creating new: main.go" in out
    assert out.rstrip().endswith("Done")


def test_cli_prompts_for_missing_coordinates(monkeypatch: pytest.MonkeyPatch, workspace: Path):
    monkeypatch.setenv("GOPATH", str(workspace))
    read = ScriptedInput(" gitlab.com ", "zulily")

    exit_code = main(["--project", "fizzbuzz"], read=read)

    assert exit_code == 0
    assert read.prompts == [
        "Enter the name of git repository (e.g. github.com): ",
        "Enter the namespace in the repository (e.g. zulily): ",
    ]
    assert (workspace / "src" / "gitlab.com" / "zulily" / "fizzbuzz" / "main.go").is_file()


def test_cli_invalid_name_exits_with_error(
    monkeypatch: pytest.MonkeyPatch, workspace: Path, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setenv("GOPATH", str(workspace))

    exit_code = main(["--repository", "github.com", "--namespace", "acme", "--project", "Widget!"])

    assert exit_code == 1
    assert "Widget!" in capsys.readouterr().out
    assert list((workspace / "src").iterdir()) == []


def test_cli_closed_stdin_fails_validation(monkeypatch: pytest.MonkeyPatch, workspace: Path):
    monkeypatch.setenv("GOPATH", str(workspace))

    assert main([], read=ScriptedInput()) == 1


def test_cli_missing_workspace(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    monkeypatch.delenv("GOPATH", raising=False)

    exit_code = main(["--repository", "github.com", "--namespace", "acme", "--project", "widget"])

    assert exit_code == 1
    assert "$GOPATH is not set" in capsys.readouterr().out


def test_cli_declined_overwrite(monkeypatch: pytest.MonkeyPatch, workspace: Path, capsys: pytest.CaptureFixture[str]):
    monkeypatch.setenv("GOPATH", str(workspace))
    root = workspace / "src" / "github.com" / "acme" / "widget"
    root.mkdir(parents=True)
    read = ScriptedInput("n")

    exit_code = main(["--repository", "github.com", "--namespace", "acme", "--project", "widget"], read=read)

    assert exit_code == 1
    assert read.prompts == [f"{root} already exists. Overwrite existing files? [y/n]: "]
    assert f"{root} already exists" in capsys.readouterr().out
    assert list(root.iterdir()) == []


def test_cli_confirmed_overwrite_uses_same_reader(monkeypatch: pytest.MonkeyPatch, workspace: Path):
    monkeypatch.setenv("GOPATH", str(workspace))
    root = workspace / "src" / "github.com" / "acme" / "widget"
    root.mkdir(parents=True)
    read = ScriptedInput("acme", "Y")

    exit_code = main(["--repository", "github.com", "--project", "widget"], read=read)

    assert exit_code == 0
    assert len(read.prompts) == 2
    assert (root / "main.go").is_file()


def test_cli_unwritable_destination_exits_with_error(
    monkeypatch: pytest.MonkeyPatch, workspace: Path, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setenv("GOPATH", str(workspace))
    root = workspace / "src" / "github.com" / "acme" / "widget"
    (root / "README.md").mkdir(parents=True)

    exit_code = main(
        ["--repository", "github.com", "--namespace", "acme", "--project", "widget"],
        read=ScriptedInput("y"),
    )

    last_line = capsys.readouterr().out.strip().splitlines()[-1]
    assert exit_code == 1
    assert last_line.startswith("[Errno")
    assert last_line.endswith("README.md'")


def test_cli_undecodable_template_exits_with_error(
    monkeypatch: pytest.MonkeyPatch, workspace: Path, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setenv("GOPATH", str(workspace))
    store = MappingAssetStore({"build/Dockerfile": "FROM scratch\n", "a.template": b"\xff\xfe"})
    monkeypatch.setattr(cli, "BundledAssetStore", lambda: store)

    exit_code = main(["--repository", "github.com", "--namespace", "acme", "--project", "widget"])

    assert exit_code == 1
    assert "a.template: body is not valid UTF-8" in capsys.readouterr().out


def test_cli_verbose_forwards_command_output(
    monkeypatch: pytest.MonkeyPatch, workspace: Path, fake_commands: RecordingRunner
):
    monkeypatch.setenv("GOPATH", str(workspace))

    main(["-v", "--repository", "github.com", "--namespace", "acme", "--project", "widget"])

    assert all(kwargs["stdout"] is None for kwargs in fake_commands.kwargs)
