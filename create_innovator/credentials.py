"""
credentials.py

Responsibility: Persist the GitHub token in the user's npm config (`~/.npmrc`).

Two line forms are managed:
- `//npm.pkg.github.com/:_authToken=<token>`
- `@<org>:registry=<registry url>`

Both are upserted; every other line is preserved verbatim and the file always
ends with exactly one trailing newline.
"""

from __future__ import annotations

from pathlib import Path

AUTH_TOKEN_PREFIX = "//npm.pkg.github.com/:_authToken="


class CredentialStore:
    """Raw read/write access to the credentials file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")


def registry_line(org: str, registry_url: str = "https://npm.pkg.github.com") -> str:
    return f"@{org}:registry={registry_url}"


def get_stored_token(store: CredentialStore) -> str | None:
    for line in store.read().split("\n"):
        trimmed = line.strip()
        if trimmed.startswith(AUTH_TOKEN_PREFIX):
            token = trimmed[len(AUTH_TOKEN_PREFIX) :]
            if token:
                return token
    return None


def save_token(
    store: CredentialStore,
    token: str,
    org: str,
    registry_url: str = "https://npm.pkg.github.com",
) -> None:
    registry = registry_line(org, registry_url)
    registry_key = f"@{org}:registry="
    content = store.read()
    lines = content.split("\n") if content else []

    has_token = False
    has_registry = False
    updated: list[str] = []
    for line in lines:
        trimmed = line.strip()
        if trimmed.startswith(AUTH_TOKEN_PREFIX):
            has_token = True
            updated.append(f"{AUTH_TOKEN_PREFIX}{token}")
            continue
        if trimmed.startswith(registry_key):
            has_registry = True
            updated.append(registry)
            continue
        updated.append(line)

    # Drop trailing blanks so the appended lines follow the last real entry.
    while updated and updated[-1] == "":
        updated.pop()

    if not has_token:
        updated.append(f"{AUTH_TOKEN_PREFIX}{token}")
    if not has_registry:
        updated.append(registry)

    store.write("\n".join(updated) + "\n")
