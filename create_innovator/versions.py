"""
versions.py

Responsibility: Resolve which template tag to scaffold from.

Tag naming:
- `release-v*` tags are stable and always offered
- other `v*` tags are experimental and only offered on request

The remote listing order (newest first) is kept; the first entry is "latest".
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from create_innovator.config import EXPERIMENTAL_TAG_PREFIX, STABLE_TAG_PREFIX, Settings
from create_innovator.errors import NoTagsFound
from create_innovator.github_client import GitHubClient
from create_innovator.prompts import ConsoleUI


def is_stable(tag: str) -> bool:
    return tag.startswith(STABLE_TAG_PREFIX)


def filter_tags(names: Iterable[str], *, include_experimental: bool = False) -> list[str]:
    tags: list[str] = []
    for name in names:
        if is_stable(name):
            tags.append(name)
        elif include_experimental and name.startswith(EXPERIMENTAL_TAG_PREFIX):
            tags.append(name)
    return tags


def fetch_tags(
    client: GitHubClient,
    settings: Settings,
    *,
    include_experimental: bool = False,
) -> list[str]:
    """
    Return matching tag names in remote order. An empty list is not an error here.
    """
    return filter_tags(
        client.list_tags(settings.github_org, settings.template_repo),
        include_experimental=include_experimental,
    )


def format_choices(tags: Sequence[str]) -> list[str]:
    labels: list[str] = []
    for i, tag in enumerate(tags):
        notes = []
        if i == 0:
            notes.append("latest")
        if not is_stable(tag):
            notes.append("experimental")
        labels.append(f"{tag} ({', '.join(notes)})" if notes else tag)
    return labels


def select_version(
    client: GitHubClient,
    settings: Settings,
    ui: ConsoleUI,
    *,
    include_experimental: bool = False,
    latest: bool = False,
) -> str:
    with ui.status("Fetching available versions"):
        tags = fetch_tags(client, settings, include_experimental=include_experimental)
    if not tags:
        raise NoTagsFound(settings.template_slug)

    if latest:
        ui.success(f"Using latest version {tags[0]}")
        return tags[0]

    index = ui.select("Select a template version", format_choices(tags), default=0)
    return tags[index]
