"""
Auto-build strategies for the build metadata field.

Each AutoBuild mode maps to exactly one BuildStrategy in STRATEGIES.
MANUAL means the build field holds whatever the caller assigned; every
other mode is read-only and computes the build metadata on each read:

- timestamp:        current UTC time, YYYYMMDDHHMMSS
- git-commit:       abbreviated hash of HEAD (via the git CLI)
- ci-build-number:  build counter exported by the CI system

To add a strategy, add an AutoBuild member and a STRATEGIES entry.
"""

import dataclasses
import enum
import os
import subprocess
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Callable, Optional, Tuple

from .identifier import correct_identifier

# Checked in order; the first non-empty value wins
CI_BUILD_NUMBER_VARS = (
    "BUILD_NUMBER",             # Jenkins, TeamCity
    "GITHUB_RUN_NUMBER",        # GitHub Actions
    "CI_PIPELINE_IID",          # GitLab CI
    "BUILDKITE_BUILD_NUMBER",
    "CIRCLE_BUILD_NUM",
    "TRAVIS_BUILD_NUMBER",
    "BITBUCKET_BUILD_NUMBER",
)


class AutoBuild(str, enum.Enum):
    """Selects where the build metadata comes from."""

    MANUAL = "manual"
    TIMESTAMP = "timestamp"
    GIT_COMMIT = "git-commit"
    CI_BUILD_NUMBER = "ci-build-number"


@dataclasses.dataclass(frozen=True)
class BuildStrategy:
    """A named source of build metadata."""

    mode: AutoBuild
    description: str
    generate: Optional[Callable[[], str]] = None

    @property
    def read_only(self) -> bool:
        return self.generate is not None


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")


def _git_commit() -> str:
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            timeout=10,
        )
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return ""
    if proc.returncode != 0:
        return ""
    return proc.stdout.decode(errors="replace").strip()


def _ci_build_number() -> str:
    for name in CI_BUILD_NUMBER_VARS:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


def _sanitize(raw: str) -> Tuple[str, ...]:
    """Turn generator output into valid build identifiers."""
    identifiers = (correct_identifier(part, numeric_rule=False) for part in raw.split("."))
    return tuple(ident for ident in identifiers if ident)


STRATEGIES = MappingProxyType({
    AutoBuild.MANUAL: BuildStrategy(
        AutoBuild.MANUAL,
        "build metadata is assigned by the caller",
    ),
    AutoBuild.TIMESTAMP: BuildStrategy(
        AutoBuild.TIMESTAMP,
        "current UTC time (YYYYMMDDHHMMSS)",
        _timestamp,
    ),
    AutoBuild.GIT_COMMIT: BuildStrategy(
        AutoBuild.GIT_COMMIT,
        "abbreviated hash of the checked-out git commit",
        _git_commit,
    ),
    AutoBuild.CI_BUILD_NUMBER: BuildStrategy(
        AutoBuild.CI_BUILD_NUMBER,
        "build number exported by the CI system",
        _ci_build_number,
    ),
})


def get_strategy(mode) -> BuildStrategy:
    """Look up the strategy for an AutoBuild member or its string value."""
    return STRATEGIES[AutoBuild(mode)]


def generate_build(mode) -> Optional[Tuple[str, ...]]:
    """Compute build identifiers for mode.

    Returns None for MANUAL, since the value then lives on the version.
    """
    strategy = get_strategy(mode)
    if not strategy.read_only:
        return None
    return _sanitize(strategy.generate())
