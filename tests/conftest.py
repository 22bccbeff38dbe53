from __future__ import annotations

from pathlib import Path

import pytest

from create_innovator.config import Settings
from tests.fakes import FakeRunner, FakeUI


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(credentials_path=tmp_path / ".npmrc")


@pytest.fixture()
def ui() -> FakeUI:
    return FakeUI()


@pytest.fixture()
def runner() -> FakeRunner:
    return FakeRunner()
