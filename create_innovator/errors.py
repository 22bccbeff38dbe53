"""
errors.py

Responsibility: The exception taxonomy shared by every scaffolding phase.

Every failure that should abort a run derives from `ScaffoldError`; the CLI turns
those into a message and a non-zero exit status. `UserCancelled` is deliberately
outside that hierarchy: a cancelled prompt is a user decision, not a failure.
"""

from __future__ import annotations

from collections.abc import Sequence


class ScaffoldError(RuntimeError):
    pass


class UserCancelled(Exception):
    """Raised when the user aborts an interactive prompt."""


class ConfigError(ScaffoldError):
    pass


class DestinationExists(ScaffoldError):
    def __init__(self, path: str) -> None:
        super().__init__(f'Directory "{path}" already exists. Please choose a different project name.')
        self.path = path


class ToolingMissing(ScaffoldError):
    def __init__(self, tool: str, hint: str = "") -> None:
        message = f"{tool} is not installed."
        if hint:
            message = f"{message}\n{hint}"
        super().__init__(message)
        self.tool = tool


class NoTagsFound(ScaffoldError):
    def __init__(self, repo: str) -> None:
        super().__init__(f"No release tags found in {repo}.")
        self.repo = repo


class ManifestMissing(ScaffoldError):
    pass


class ManifestInvalid(ScaffoldError):
    pass


class RequiredValueMissing(ScaffoldError):
    def __init__(self, key: str) -> None:
        super().__init__(f"A value for {key} is required.")
        self.key = key


class RemoteAccessDenied(ScaffoldError):
    def __init__(self, resource: str, message: str) -> None:
        super().__init__(message)
        self.resource = resource


class MissingScopes(ScaffoldError):
    def __init__(self, username: str, missing: Sequence[str], required: Sequence[str]) -> None:
        super().__init__(
            f"Token for @{username} is missing required scopes: {', '.join(missing)}.\n"
            f"Please create a new token at https://github.com/settings/tokens/new "
            f"with scopes: {', '.join(required)}"
        )
        self.username = username
        self.missing = list(missing)


class ProcessInvocationFailed(ScaffoldError):
    def __init__(self, args: Sequence[str], output: str = "") -> None:
        message = f"Command failed: {' '.join(args)}"
        if output.strip():
            message = f"{message}\n\n{output.strip()}"
        super().__init__(message)
        self.command = list(args)
        self.output = output


class GitHubError(ScaffoldError):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status
