"""
rewrite.py

Responsibility: Turn a freshly cloned template into the user's project.

Two rewrite strategies share one interface (`rewrite(root, context) -> int`):
- `IdentifierRewrite`: rename the template's own name in four case variants
  (`innovator-template`, `innovatorTemplate`, `InnovatorTemplate`, `Innovator Template`)
- `ManifestRewrite`: resolve and apply the placeholders declared in `template.config.json`

`choose_strategy` prefers the manifest whenever the template ships one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from create_innovator.casing import to_camel, to_pascal, to_title
from create_innovator.config import MANIFEST_FILENAME
from create_innovator.files import list_files, read_text_file, write_text_file
from create_innovator.manifest import apply_replacements, collect_values, read_manifest
from create_innovator.prompts import ConsoleUI

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "innovator-template"
TEMPLATE_ONLY_FILES = ("changelog.md", "claude.md", "readme.md")


@dataclass(frozen=True)
class ReplacementPair:
    old: str
    new: str


def replacement_pairs(new_name: str, template_name: str = TEMPLATE_NAME) -> list[ReplacementPair]:
    """
    The four case-variant pairs, longest `old` first so that no pair is shadowed
    by a shorter one matching inside it.
    """
    pairs = [
        ReplacementPair(template_name, new_name),
        ReplacementPair(to_camel(template_name), to_camel(new_name)),
        ReplacementPair(to_pascal(template_name), to_pascal(new_name)),
        ReplacementPair(to_title(template_name), to_title(new_name)),
    ]
    return sorted(pairs, key=lambda p: len(p.old), reverse=True)


def rewrite_identifiers(root: str | Path, new_name: str, template_name: str = TEMPLATE_NAME) -> int:
    """
    Replace every template identifier variant in the text files under root.

    Returns the number of files rewritten.
    """
    root_path = Path(root)
    pairs = replacement_pairs(new_name, template_name)
    changed_count = 0

    for rel in list_files(root_path):
        path = root_path / rel
        content = read_text_file(path)
        if content is None:
            logger.debug("Skipping binary file %s", rel)
            continue

        changed = False
        for pair in pairs:
            if pair.old in content:
                content = content.replace(pair.old, pair.new)
                changed = True

        if changed:
            write_text_file(path, content)
            changed_count += 1

    return changed_count


def remove_template_files(root: str | Path) -> list[str]:
    """
    Delete the template's own docs from the project root (matched case-insensitively).
    """
    root_path = Path(root)
    removed: list[str] = []
    for entry in sorted(root_path.iterdir()):
        if entry.is_file() and entry.name.lower() in TEMPLATE_ONLY_FILES:
            entry.unlink()
            removed.append(entry.name)
    return removed


@dataclass(frozen=True)
class RewriteContext:
    project_name: str
    defaults: dict[str, str] = field(default_factory=dict)


class RewriteStrategy(Protocol):
    name: str

    def rewrite(self, root: Path, context: RewriteContext) -> int: ...


class IdentifierRewrite:
    name = "identifiers"

    def __init__(self, template_name: str = TEMPLATE_NAME) -> None:
        self.template_name = template_name

    def rewrite(self, root: Path, context: RewriteContext) -> int:
        return rewrite_identifiers(root, context.project_name, self.template_name)


class ManifestRewrite:
    name = "manifest"

    def __init__(self, ui: ConsoleUI) -> None:
        self.ui = ui

    def rewrite(self, root: Path, context: RewriteContext) -> int:
        config = read_manifest(root)
        defaults = {"PROJECT_NAME": context.project_name, **context.defaults}
        values = collect_values(config.placeholders, self.ui, defaults)
        return apply_replacements(root, config, values)


def choose_strategy(root: str | Path, ui: ConsoleUI, template_name: str = TEMPLATE_NAME) -> RewriteStrategy:
    if (Path(root) / MANIFEST_FILENAME).is_file():
        return ManifestRewrite(ui)
    return IdentifierRewrite(template_name)
