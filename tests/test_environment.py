from __future__ import annotations

import sys
from pathlib import Path

import pytest

from create_innovator.environment import setup_project
from create_innovator.runner import CommandRunner
from tests.fakes import FakeRunner, FakeUI


def test_skips_corepack_when_pnpm_available(runner: FakeRunner, ui: FakeUI):
    assert setup_project(runner, "my-project", ui) is True

    assert runner.commands == [
        ["pnpm", "--version"],
        ["pnpm", "install"],
        ["pnpm", "test", "-u"],
        ["git", "add", "."],
        ["git", "commit", "-m", "feat(my-project): initial commit"],
    ]
    cwds = {cwd for args, cwd, _env in runner.calls if args != ["pnpm", "--version"]}
    assert cwds == {Path("my-project")}
    _args, _cwd, env = runner.calls[-1]
    assert env is not None and env["HUSKY"] == "0"
    assert ui.kinds("warn") == []


def test_enables_corepack_when_pnpm_missing(ui: FakeUI):
    runner = FakeRunner(fail=lambda args: args == ["pnpm", "--version"])

    assert setup_project(runner, "my-project", ui) is True
    assert ["corepack", "enable"] in runner.commands
    assert ["pnpm", "install"] in runner.commands


@pytest.mark.parametrize(
    "failing",
    [["corepack", "enable"], ["pnpm", "install"], ["pnpm", "test", "-u"], ["git", "add", "."]],
)
def test_failures_become_warnings(ui: FakeUI, failing: list[str]):
    def fail(args: list[str]) -> bool:
        if args == ["pnpm", "--version"]:
            return failing[0] == "corepack"
        return args == failing

    assert setup_project(FakeRunner(fail=fail), "my-project", ui) is False
    assert ui.kinds("warn")
    assert "pnpm install" in ui.kinds("info")[-1]


def test_never_raises(ui: FakeUI):
    assert setup_project(FakeRunner(fail=lambda args: True), "my-project", ui) is False


class ExplodingRunner(FakeRunner):
    def run(self, args, *, cwd=None, env=None):
        result = super().run(args, cwd=cwd, env=env)
        if args[:2] == ["pnpm", "install"]:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return result


def test_unexpected_errors_are_downgraded(ui: FakeUI):
    runner = ExplodingRunner()

    assert setup_project(runner, "my-project", ui) is False
    assert ["pnpm", "test", "-u"] not in runner.commands
    assert ui.kinds("warn")


def test_child_with_undecodable_output_does_not_break_setup(ui: FakeUI, tmp_path):
    script = "import sys; sys.stdout.buffer.write(b'\\xff\\xfe')"

    class PythonRunner(CommandRunner):
        def run(self, args, *, cwd=None, env=None):
            return super().run([sys.executable, "-c", script], cwd=cwd, env=env)

    assert setup_project(PythonRunner(), tmp_path, ui) is True
