"""
casing.py

Responsibility: Derive the case variants of a kebab-case identifier.

Inputs are ASCII kebab-case names (`my-cool-app`); callers validate them first.
"""

from __future__ import annotations


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_camel(kebab: str) -> str:
    first, *rest = kebab.split("-")
    return first + "".join(_capitalize(word) for word in rest)


def to_pascal(kebab: str) -> str:
    return _capitalize(to_camel(kebab))


def to_title(kebab: str) -> str:
    return " ".join(_capitalize(word) for word in kebab.split("-"))
