"""Shared fixtures for envirator tests."""

from pathlib import Path

import pytest

from envirator.testing.pytest_fixtures import (  # noqa: F401 - fixtures re-exported for tests
    make_env,
    memory_store,
    recording_logger,
    recording_terminator,
)


@pytest.fixture
def env_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory holding per-environment env files."""
    (tmp_path / ".env.development").write_text(
        "PORTAL=5200\nSESSIONAL=thisissession\nI_AM_EMPTY_STRING=\n"
    )
    (tmp_path / ".env.production").write_text("PORTAL=443\n")
    (tmp_path / ".env").write_text("PORTAL=80\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path
