"""Shared test fixtures for semverkit."""

import os
import subprocess
import sys

import pytest

from semverkit.autobuild import CI_BUILD_NUMBER_VARS


@pytest.fixture
def semverkit_home(tmp_path, monkeypatch):
    """Provide an isolated ~/.semverkit/ directory for testing.

    Sets SEMVERKIT_HOME env var so config lookups use tmp_path.
    Does NOT create the directory.
    """
    home = tmp_path / ".semverkit"
    monkeypatch.setenv("SEMVERKIT_HOME", str(home))
    return home


@pytest.fixture
def config_file(semverkit_home):
    """Write arbitrary TOML content to the test config file.

    Returns a helper function. Call it with a TOML string.
    """
    def _write(content: str):
        semverkit_home.mkdir(parents=True, exist_ok=True)
        config_path = semverkit_home / "config.toml"
        config_path.write_text(content, encoding="utf-8")
        return config_path
    return _write


@pytest.fixture
def no_ci_env(monkeypatch):
    """Clear every CI build-number variable."""
    for name in CI_BUILD_NUMBER_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run_semverkit(tmp_path):
    """Run semverkit as a subprocess with isolated SEMVERKIT_HOME.

    Returns a callable: run_semverkit(args)
    The callable has a .home attribute pointing to the semverkit data dir.
    """
    semverkit_home = tmp_path / ".semverkit"

    def _run(args):
        env = os.environ.copy()
        env["SEMVERKIT_HOME"] = str(semverkit_home)
        cmd = [sys.executable, "-m", "semverkit"] + args
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            env=env,
            timeout=30,
        )

    _run.home = semverkit_home
    return _run
