"""
runner.py

Responsibility: Run external programs (`gh`, `git`, `pnpm`, ...) for the pipeline.

Every subprocess the CLI starts goes through `CommandRunner.run`, so tests can
swap in a fake runner without touching the filesystem or network.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from create_innovator.errors import ProcessInvocationFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    stdout: str = ""
    stderr: str = ""


class CommandRunner:
    def run(
        self,
        args: Sequence[str],
        *,
        cwd: str | Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """
        Run a subprocess command, raising ProcessInvocationFailed on failure.
        """
        logger.debug("Running %s (cwd=%s)", " ".join(args), cwd)
        try:
            completed = subprocess.run(
                list(args),
                cwd=str(cwd) if cwd is not None else None,
                env=dict(env) if env is not None else None,
                check=True,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise ProcessInvocationFailed(args, str(e)) from e
        except subprocess.CalledProcessError as e:
            raise ProcessInvocationFailed(args, f"{e.stdout or ''}{e.stderr or ''}") from e
        return CommandResult(args=tuple(args), stdout=completed.stdout, stderr=completed.stderr)
