"""
environment.py

Responsibility: Prepare the generated project locally (install, snapshots, first commit).

This phase is best-effort: any failed command is reported as a warning with the
commands to run by hand. `setup_project` never raises to its caller.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from create_innovator.errors import ProcessInvocationFailed
from create_innovator.prompts import ConsoleUI
from create_innovator.runner import CommandRunner

logger = logging.getLogger(__name__)


def _commit_env(base_env: dict[str, str]) -> dict[str, str]:
    # Git hooks installed by the template must not run for the initial commit.
    env = dict(base_env)
    env["HUSKY"] = "0"
    return env


def manual_steps(project_dir: str | Path, package_manager: str = "pnpm") -> str:
    return "\n".join(
        [
            f"  cd {project_dir}",
            "  corepack enable",
            f"  {package_manager} install",
            f"  {package_manager} test -u",
            "  git add .",
            '  git commit -m "initial commit"',
        ]
    )


def setup_project(
    runner: CommandRunner,
    project_dir: str | Path,
    ui: ConsoleUI,
    *,
    project_name: str | None = None,
    package_manager: str = "pnpm",
) -> bool:
    """
    Install dependencies, update test snapshots and create the initial commit.

    Returns True when every step succeeded.
    """
    cwd = Path(project_dir)
    name = project_name or cwd.name
    try:
        with ui.status(f"Checking {package_manager} availability"):
            try:
                runner.run([package_manager, "--version"])
            except ProcessInvocationFailed:
                logger.debug("%s not found, enabling corepack", package_manager)
                runner.run(["corepack", "enable"])
        ui.success(f"{package_manager} is available")

        with ui.status("Installing dependencies"):
            runner.run([package_manager, "install"], cwd=cwd)
        ui.success("Dependencies installed")

        with ui.status("Updating test snapshots"):
            runner.run([package_manager, "test", "-u"], cwd=cwd)
        ui.success("Test snapshots updated")

        with ui.status("Creating initial commit"):
            runner.run(["git", "add", "."], cwd=cwd)
            runner.run(
                ["git", "commit", "-m", f"feat({name}): initial commit"],
                cwd=cwd,
                env=_commit_env(dict(os.environ)),
            )
        ui.success("Initial commit created")
    except Exception as e:  # noqa: BLE001 - setup is best-effort, surface as a warning
        logger.debug("Setup failed: %s", e, exc_info=True)
        ui.warn("Automatic setup failed. Run these commands manually:")
        ui.info(manual_steps(cwd, package_manager))
        return False
    return True
