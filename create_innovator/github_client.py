"""
github_client.py

Responsibility: Isolate all direct GitHub REST API interaction.

This module must be the only place that:
- Constructs GitHub REST endpoints
- Sends HTTP requests to api.github.com
- Interprets GitHub API responses / error payloads

Everything else (tag selection, auth flow, CLI behavior) should use this client.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

import requests

from create_innovator.errors import GitHubError

logger = logging.getLogger(__name__)

TAGS_PAGE_SIZE = 100


@dataclass(frozen=True)
class TokenValidation:
    valid: bool
    scopes: list[str] = field(default_factory=list)
    missing_scopes: list[str] = field(default_factory=list)
    username: str = ""


class GitHubClient:
    def __init__(self, token: str, api_base: str = "https://api.github.com") -> None:
        if not token.strip():
            raise GitHubError("GitHub token is required.")
        self._token = token
        self._api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self._token}",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "create-innovator",
        }

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self._api_base}{path}"
        logger.debug("%s %s params=%s", method, path, params)
        try:
            r = requests.request(method, url, headers=self._headers(), params=params, timeout=30)
        except requests.RequestException as e:
            raise GitHubError(f"GitHub API request failed {method} {path}: {e}") from e
        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = {"message": r.text}
            message = payload.get("message", payload) if isinstance(payload, dict) else payload
            raise GitHubError(f"GitHub API error {r.status_code} {method} {path}: {message}", status=r.status_code)
        return r

    def validate_token(self, required_scopes: Sequence[str] = ("repo", "read:packages")) -> TokenValidation:
        """
        Resolve the token owner and compare the granted OAuth scopes with `required_scopes`.
        """
        r = self._request("GET", "/user")
        header = r.headers.get("X-OAuth-Scopes", "")
        scopes = [s.strip() for s in header.split(",") if s.strip()]
        missing = [s for s in required_scopes if s not in scopes]
        return TokenValidation(
            valid=True,
            scopes=scopes,
            missing_scopes=missing,
            username=str(r.json().get("login") or ""),
        )

    def check_repo_access(self, owner: str, repo: str) -> bool:
        try:
            self._request("GET", f"/repos/{owner}/{repo}")
        except GitHubError as e:
            logger.debug("Repository access check failed: %s", e)
            return False
        return True

    def check_registry_access(self, org: str) -> bool:
        try:
            self._request("GET", f"/orgs/{org}/packages", params={"package_type": "npm"})
        except GitHubError as e:
            logger.debug("Registry access check failed: %s", e)
            return False
        return True

    def list_tags(self, owner: str, repo: str) -> Iterator[str]:
        """
        Yield tag names in listing order, following pagination until a short page.
        """
        page = 1
        while True:
            r = self._request(
                "GET",
                f"/repos/{owner}/{repo}/tags",
                params={"per_page": TAGS_PAGE_SIZE, "page": page},
            )
            data = r.json()
            for item in data:
                yield str(item["name"])
            if len(data) < TAGS_PAGE_SIZE:
                return
            page += 1
