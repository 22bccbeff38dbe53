"""
config.py

Responsibility: Load CLI settings into a deterministic, typed model.

Resolution order (later wins):
1. Built-in defaults (the stormreply organization and its innovator template)
2. An optional YAML file (`~/.config/create-innovator/config.yaml` or `--config`)
3. `CREATE_INNOVATOR_*` environment variables

Every other module receives a `Settings` instance instead of reading globals.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from create_innovator.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "create-innovator" / "config.yaml"
ENV_PREFIX = "CREATE_INNOVATOR_"

REQUIRED_SCOPES: tuple[str, ...] = ("repo", "read:packages")
STABLE_TAG_PREFIX = "release-v"
EXPERIMENTAL_TAG_PREFIX = "v"
MANIFEST_FILENAME = "template.config.json"


@dataclass(frozen=True)
class Settings:
    """Where the template lives and how the generated project is set up."""

    github_org: str = "stormreply"
    template_repo: str = "innovator-template"
    api_base: str = "https://api.github.com"
    registry_url: str = "https://npm.pkg.github.com"
    credentials_path: Path = Path.home() / ".npmrc"
    package_manager: str = "pnpm"
    default_project_name: str = "my-innovator-app"

    @property
    def template_slug(self) -> str:
        return f"{self.github_org}/{self.template_repo}"


def _coerce(data: Mapping[str, Any]) -> dict[str, Any]:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown setting(s): {', '.join(unknown)}")

    out: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if key == "credentials_path":
            out[key] = Path(str(value)).expanduser()
        else:
            text = str(value).strip()
            if not text:
                raise ConfigError(f"Setting `{key}` must not be empty.")
            out[key] = text
    return out


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping/object at the top level.")
    return data


def _from_env(environ: Mapping[str, str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for f in fields(Settings):
        value = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            out[f.name] = value
    return out


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Build `Settings` from defaults, an optional YAML file and the environment.

    An explicit `config_path` must exist; the default location is optional.
    """
    env = os.environ if environ is None else environ
    settings = Settings()

    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"Config file does not exist: {path}")
        settings = replace(settings, **_coerce(_load_yaml(path)))
    elif DEFAULT_CONFIG_PATH.is_file():
        settings = replace(settings, **_coerce(_load_yaml(DEFAULT_CONFIG_PATH)))

    return replace(settings, **_coerce(_from_env(env)))
