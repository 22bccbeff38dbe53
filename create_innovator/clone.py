"""
clone.py

Responsibility: Acquire a fresh copy of the template repository.

The clone is shallow, restricted to the selected tag when one is given, and
detached from the template's history: `.git` is removed and a new repository is
initialized in place. An existing destination is never overwritten.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from create_innovator.config import Settings
from create_innovator.errors import DestinationExists, ProcessInvocationFailed, ToolingMissing
from create_innovator.runner import CommandRunner

logger = logging.getLogger(__name__)


def ensure_gh_cli(runner: CommandRunner) -> None:
    try:
        runner.run(["gh", "--version"])
    except ProcessInvocationFailed as e:
        raise ToolingMissing(
            "GitHub CLI (gh)",
            "Please install it from https://cli.github.com and try again.",
        ) from e


def clone_template(
    runner: CommandRunner,
    name: str | Path,
    settings: Settings,
    ref: str | None = None,
) -> Path:
    dest = Path(name)
    if dest.exists() or dest.is_symlink():
        raise DestinationExists(str(dest))

    git_args = ["--depth", "1"]
    if ref:
        git_args += ["--branch", ref]
    runner.run(["gh", "repo", "clone", settings.template_slug, str(dest), "--", *git_args])
    logger.debug("Cloned %s@%s into %s", settings.template_slug, ref or "HEAD", dest)

    git_dir = dest / ".git"
    if git_dir.exists():
        shutil.rmtree(git_dir)
    runner.run(["git", "init", str(dest)])
    return dest
