"""
create_innovator package

This package implements the `create-innovator` scaffolding CLI.

Key responsibilities are split across modules:
- `versions.py`: list template tags and pick the version to scaffold from
- `clone.py`: shallow-clone the template and detach it from its history
- `rewrite.py`: rename template identifiers across the cloned tree
- `manifest.py`: resolve `template.config.json` placeholders and apply them
- `auth.py` / `github_client.py` / `credentials.py`: GitHub token handling
- `environment.py`: dependency install, snapshot update and initial commit
- `cli.py`: CLI entrypoint and orchestration (auth -> version -> clone -> rewrite -> setup)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
