"""
auth.py

Responsibility: Obtain a GitHub token that can read the template and the package registry.

Flow:
1) Read a stored token from the credential store, else prompt for one
2) Validate scopes (`repo`, `read:packages`)
3) Confirm repository and registry access
4) Save the token back (also registers the org's npm registry)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from create_innovator.config import REQUIRED_SCOPES, Settings
from create_innovator.credentials import CredentialStore, get_stored_token, save_token
from create_innovator.errors import MissingScopes, RemoteAccessDenied, RequiredValueMissing
from create_innovator.github_client import GitHubClient
from create_innovator.prompts import ConsoleUI

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], GitHubClient]


def prompt_for_token(ui: ConsoleUI) -> str:
    ui.note(
        "\n".join(
            [
                "A GitHub Personal Access Token (PAT) is required to access the "
                "template repository and package registry.",
                "",
                "1. Go to https://github.com/settings/tokens/new",
                f"2. Select scopes: {', '.join(REQUIRED_SCOPES)}",
                "3. Generate and paste the token below",
            ]
        ),
        title="GitHub Authentication",
    )
    token = ui.secret("Enter your GitHub Personal Access Token").strip()
    if not token:
        raise RequiredValueMissing("GitHub token")
    return token


def ensure_github_auth(
    settings: Settings,
    ui: ConsoleUI,
    *,
    store: CredentialStore | None = None,
    client_factory: ClientFactory | None = None,
) -> str:
    store = store or CredentialStore(settings.credentials_path)
    make_client = client_factory or (lambda token: GitHubClient(token, api_base=settings.api_base))

    token = get_stored_token(store)
    if token:
        ui.success(f"Token found in {store.path}")
    else:
        logger.debug("No token in %s", store.path)
        token = prompt_for_token(ui)

    client = make_client(token)

    with ui.status("Validating token with GitHub"):
        validation = client.validate_token(REQUIRED_SCOPES)
    if validation.missing_scopes:
        raise MissingScopes(validation.username, validation.missing_scopes, REQUIRED_SCOPES)
    ui.success(f"Authenticated as @{validation.username}")

    with ui.status(f"Checking access to {settings.template_slug}"):
        has_repo_access = client.check_repo_access(settings.github_org, settings.template_repo)
    if not has_repo_access:
        raise RemoteAccessDenied(
            "repository",
            f"Token for @{validation.username} does not have access to {settings.template_slug}.\n"
            f"Please ensure you are a member of the {settings.github_org} organization.",
        )
    ui.success(f"Access to {settings.template_slug} confirmed")

    with ui.status(f"Checking access to {settings.github_org} package registry"):
        has_registry_access = client.check_registry_access(settings.github_org)
    if not has_registry_access:
        raise RemoteAccessDenied(
            "registry",
            f"Token for @{validation.username} does not have access to the "
            f"{settings.github_org} package registry.\n"
            "Please ensure your token has the read:packages scope.",
        )
    ui.success(f"Access to {settings.github_org} package registry confirmed")

    save_token(store, token, settings.github_org, settings.registry_url)
    logger.debug("Token saved to %s", store.path)
    return token
