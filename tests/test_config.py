from __future__ import annotations

from pathlib import Path

import pytest

from create_innovator.config import Settings, load_settings
from create_innovator.errors import ConfigError


def test_defaults_without_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setattr("create_innovator.config.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")
    settings = load_settings(environ={})
    assert settings == Settings()
    assert settings.template_slug == "stormreply/innovator-template"


def test_yaml_file_then_env_override(tmp_path: Path):
    config = tmp_path / "config.yaml"
    config.write_text(
        "github_org: acme\ntemplate_repo: acme-template\ncredentials_path: ~/custom-npmrc\n",
        encoding="utf-8",
    )

    settings = load_settings(config, environ={"CREATE_INNOVATOR_TEMPLATE_REPO": "other-template"})

    assert settings.github_org == "acme"
    assert settings.template_repo == "other-template"
    assert settings.credentials_path == Path("~/custom-npmrc").expanduser()


def test_explicit_config_must_exist(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "nope.yaml", environ={})


def test_rejects_unknown_keys_and_non_mappings(tmp_path: Path):
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("colour: blue\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="colour"):
        load_settings(unknown, environ={})

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(listing, environ={})


def test_rejects_malformed_yaml(tmp_path: Path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("github_org: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(broken, environ={})
