from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from create_innovator.errors import ProcessInvocationFailed
from create_innovator.runner import CommandRunner


def test_run_captures_output(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    seen: dict[str, object] = {}

    def fake_run(args, **kwargs):
        seen.update(kwargs, args=args)
        return subprocess.CompletedProcess(args, 0, stdout="out", stderr="")

    monkeypatch.setattr(subprocess, "run", fake_run)
    result = CommandRunner().run(["git", "init"], cwd=tmp_path, env={"A": "1"})

    assert result.args == ("git", "init")
    assert result.stdout == "out"
    assert seen["cwd"] == str(tmp_path)
    assert seen["env"] == {"A": "1"}
    assert seen["check"] is True
    assert seen["errors"] == "replace"


def test_non_zero_exit_raises(monkeypatch: pytest.MonkeyPatch):
    def fake_run(args, **kwargs):
        raise subprocess.CalledProcessError(1, args, output="", stderr="fatal: nope")

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(ProcessInvocationFailed, match="fatal: nope") as excinfo:
        CommandRunner().run(["git", "push"])
    assert excinfo.value.command == ["git", "push"]


def test_missing_binary_raises():
    with pytest.raises(ProcessInvocationFailed):
        CommandRunner().run(["definitely-not-a-real-binary-4f1c"])


def test_real_process_round_trip():
    result = CommandRunner().run([sys.executable, "-c", "print('hi')"])
    assert result.stdout.strip() == "hi"


def test_undecodable_output_is_replaced():
    script = "import sys; sys.stdout.buffer.write(b'\\xff\\xfeok'); sys.stderr.buffer.write(b'\\xff')"
    result = CommandRunner().run([sys.executable, "-c", script])
    assert result.stdout == "\ufffd\ufffdok"
    assert result.stderr == "\ufffd"


def test_undecodable_output_on_failure_becomes_process_error():
    script = "import sys; sys.stderr.buffer.write(b'\\xff bad'); sys.exit(3)"
    with pytest.raises(ProcessInvocationFailed, match="bad"):
        CommandRunner().run([sys.executable, "-c", script])
