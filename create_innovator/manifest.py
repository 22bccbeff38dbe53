"""
manifest.py

Responsibility: Apply `template.config.json` placeholders to a scaffolded project.

Manifest shape:
    {
      "placeholders": [{"key": "PROJECT_NAME", "prompt": "Project name", "transform": "pascal"}],
      "files": ["*.ts", "package.json"],
      "exclude": ["node_modules"]
    }

Pattern rules:
- a pattern starting with `*` matches paths ending with the rest (`*.ts`)
- any other pattern matches paths containing it (`node_modules`)

The manifest is scaffolding metadata: it is deleted once replacements are applied.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from create_innovator.casing import to_camel, to_pascal, to_title
from create_innovator.config import MANIFEST_FILENAME
from create_innovator.errors import ManifestInvalid, ManifestMissing, RequiredValueMissing, UserCancelled
from create_innovator.files import list_files, read_text_file, write_text_file
from create_innovator.prompts import ConsoleUI

logger = logging.getLogger(__name__)

TRANSFORMS: dict[str, Callable[[str], str]] = {
    "camel": to_camel,
    "pascal": to_pascal,
    "title": to_title,
    "upper": str.upper,
    "lower": str.lower,
}


@dataclass(frozen=True)
class Placeholder:
    key: str
    prompt: str
    transform: str | None = None


@dataclass(frozen=True)
class TemplateConfig:
    placeholders: list[Placeholder] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)


def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    raw = data.get(key) or []
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ManifestInvalid(f"`{key}` must be a list of strings.")
    return list(raw)


def _parse_placeholder(raw: Any) -> Placeholder:
    if not isinstance(raw, dict):
        raise ManifestInvalid("Each placeholder must be an object.")
    key = raw.get("key")
    prompt = raw.get("prompt")
    transform = raw.get("transform")
    if not isinstance(key, str) or not key.strip():
        raise ManifestInvalid("Placeholder `key` must be a non-empty string.")
    if not isinstance(prompt, str):
        raise ManifestInvalid(f"Placeholder {key}: `prompt` must be a string.")
    if transform is not None and transform not in TRANSFORMS:
        raise ManifestInvalid(
            f"Placeholder {key}: unknown transform {transform!r} (expected one of {', '.join(TRANSFORMS)})."
        )
    return Placeholder(key=key.strip(), prompt=prompt, transform=transform)


def read_manifest(root: str | Path) -> TemplateConfig:
    path = Path(root) / MANIFEST_FILENAME
    if not path.is_file():
        raise ManifestMissing(f"Template manifest not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        raise ManifestInvalid(f"Failed to parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestInvalid(f"{path} must contain a JSON object at the top level.")

    raw_placeholders = data.get("placeholders") or []
    if not isinstance(raw_placeholders, list):
        raise ManifestInvalid("`placeholders` must be a list.")

    return TemplateConfig(
        placeholders=[_parse_placeholder(raw) for raw in raw_placeholders],
        files=_string_list(data, "files"),
        exclude=_string_list(data, "exclude"),
    )


def collect_values(
    placeholders: Sequence[Placeholder],
    ui: ConsoleUI,
    defaults: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Resolve each placeholder in declared order.

    A key present in `defaults` is used as-is without prompting. Otherwise the
    user is asked once; a cancelled or blank answer aborts the whole collection.
    """
    defaults = defaults or {}
    values: dict[str, str] = {}
    for placeholder in placeholders:
        if placeholder.key in defaults:
            value = defaults[placeholder.key]
        else:
            try:
                value = ui.text(placeholder.prompt)
            except UserCancelled as e:
                raise RequiredValueMissing(placeholder.key) from e
            if not value or not value.strip():
                raise RequiredValueMissing(placeholder.key)
        if placeholder.transform:
            value = TRANSFORMS[placeholder.transform](value)
        values[placeholder.key] = value
    return values


def matches_pattern(path: str, pattern: str) -> bool:
    if pattern.startswith("*"):
        return path.endswith(pattern[1:])
    return pattern in path


def is_eligible(path: str, include: Iterable[str], exclude: Iterable[str]) -> bool:
    if not any(matches_pattern(path, p) for p in include):
        return False
    return not any(matches_pattern(path, p) for p in exclude)


def apply_replacements(root: str | Path, config: TemplateConfig, values: Mapping[str, str]) -> int:
    """
    Replace `{{KEY}}` tokens in eligible text files, then delete the manifest.

    Returns the number of files rewritten.
    """
    root_path = Path(root)
    tokens = {f"{{{{{key}}}}}": value for key, value in values.items()}
    changed_count = 0

    for rel in list_files(root_path):
        if not is_eligible(rel, config.files, config.exclude):
            continue
        path = root_path / rel
        original = read_text_file(path)
        if original is None:
            logger.debug("Skipping binary file %s", rel)
            continue

        content = original
        for token, value in tokens.items():
            if token in content:
                content = content.replace(token, value)

        if content != original:
            write_text_file(path, content)
            changed_count += 1

    (root_path / MANIFEST_FILENAME).unlink(missing_ok=True)
    return changed_count
