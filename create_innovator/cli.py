"""
cli.py

Responsibility: CLI entrypoint for create-innovator.

High-level flow (single command):
1) Resolve the project name (argument, flag, or prompt)
2) Check the GitHub CLI and authenticate against the organization
3) Select a template version (tag)
4) Clone the template at that tag into a fresh, historyless repository
5) Rewrite template identifiers / placeholders, drop template-only docs
6) Install dependencies, update snapshots, create the initial commit (best-effort)

This module should orchestrate behavior but keep concerns isolated:
- GitHub API: `github_client.py` / `auth.py`
- Versions: `versions.py`
- Cloning: `clone.py`
- Rewriting: `rewrite.py` / `manifest.py`
- Local setup: `environment.py`
"""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Sequence
from pathlib import Path

from create_innovator import __version__
from create_innovator.auth import ClientFactory, ensure_github_auth
from create_innovator.clone import clone_template, ensure_gh_cli
from create_innovator.config import Settings, load_settings
from create_innovator.environment import setup_project
from create_innovator.errors import DestinationExists, ScaffoldError, UserCancelled
from create_innovator.github_client import GitHubClient
from create_innovator.prompts import ConsoleUI
from create_innovator.rewrite import RewriteContext, choose_strategy, remove_template_files
from create_innovator.runner import CommandRunner
from create_innovator.versions import select_version

logger = logging.getLogger(__name__)

PROJECT_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")


class CLIError(ScaffoldError):
    pass


def validate_project_name(name: str) -> str:
    name = name.strip()
    if not PROJECT_NAME_PATTERN.match(name):
        raise CLIError(
            f'Invalid project name "{name}". Use lowercase kebab-case, e.g. "my-innovator-app".'
        )
    return name


def _resolve_project_name(args: argparse.Namespace, settings: Settings, ui: ConsoleUI) -> str:
    name = args.name_flag or args.name
    if not name:
        name = ui.text("Project name", default=settings.default_project_name)
    return validate_project_name(name)


def scaffold_cmd(
    args: argparse.Namespace,
    *,
    ui: ConsoleUI,
    runner: CommandRunner,
    client_factory: ClientFactory | None = None,
) -> int:
    settings = load_settings(args.config)
    make_client = client_factory or (lambda token: GitHubClient(token, api_base=settings.api_base))

    project_name = _resolve_project_name(args, settings, ui)
    if Path(project_name).exists() or Path(project_name).is_symlink():
        raise DestinationExists(project_name)

    ensure_gh_cli(runner)
    token = ensure_github_auth(settings, ui, client_factory=make_client)

    version = select_version(
        make_client(token),
        settings,
        ui,
        include_experimental=bool(args.experimental),
        latest=bool(args.latest),
    )

    with ui.status(f"Cloning {settings.template_slug}@{version}"):
        project_dir = clone_template(runner, project_name, settings, ref=version)
    ui.success(f"Cloned {settings.template_slug}@{version} into {project_dir}")

    strategy = choose_strategy(project_dir, ui, settings.template_repo)
    logger.debug("Using %s rewrite strategy", strategy.name)
    changed = strategy.rewrite(project_dir, RewriteContext(project_name=project_name))
    ui.success(f"Replaced template names in {changed} file(s)")

    removed = remove_template_files(project_dir)
    if removed:
        logger.debug("Removed template files: %s", ", ".join(removed))

    setup_project(
        runner,
        project_dir,
        ui,
        project_name=project_name,
        package_manager=settings.package_manager,
    )

    ui.success(f"{project_name} is ready!")
    ui.info(f"\n  cd {project_name}\n  {settings.package_manager} dev\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="create-innovator", description="Create an Innovator app")
    p.add_argument("name", nargs="?", default=None, help="Project name (lowercase kebab-case)")
    p.add_argument("--name", dest="name_flag", default=None, help="Project name (same as the positional argument)")
    p.add_argument("--latest", action="store_true", help="Use the latest release without asking")
    p.add_argument("--experimental", action="store_true", help="Also offer experimental versions")
    p.add_argument("--config", default=None, help="Path to a YAML settings file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(
    argv: Sequence[str] | None = None,
    *,
    ui: ConsoleUI | None = None,
    runner: CommandRunner | None = None,
    client_factory: ClientFactory | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ui = ui or ConsoleUI()
    try:
        return scaffold_cmd(args, ui=ui, runner=runner or CommandRunner(), client_factory=client_factory)
    except UserCancelled:
        ui.info("Cancelled.")
        return 0
    except ScaffoldError as e:
        ui.error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
