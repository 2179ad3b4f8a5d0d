"""
semverkit - Semantic Versioning 2.0.0 values for Python.

Parse, validate, auto-correct, compare and bump semantic versions, and
derive integer build codes for release pipelines.

Usage:
    >>> from semverkit import parse
    >>> v = parse("1.2.3-rc.1+build.5")
    >>> v.increment_minor().to_string()
    '1.3.0-rc.1+build.5'
    >>> parse("1.0.0-01").validate().corrected.to_string()
    '1.0.0-1'
"""

from ._version import __version__, get_version, VERSION
from .autobuild import AutoBuild, BuildStrategy, STRATEGIES, get_strategy, generate_build
from .build_code import BuildCodeOverflowError, build_code
from .identifier import ErrorKind, IdentifierCheck, check_identifier, correct_identifier
from .semver import (
    SEMVER_PATTERN,
    Ordering,
    SemVer,
    SemVerParseError,
    assign_numeral,
    compare,
    is_canonical,
    parse,
)
from .validation import ValidationResult, validate

__all__ = [
    "__version__",
    "get_version",
    "VERSION",
    # Value type
    "SemVer",
    "SemVerParseError",
    "SEMVER_PATTERN",
    "parse",
    "is_canonical",
    "assign_numeral",
    # Precedence
    "Ordering",
    "compare",
    # Validation
    "ErrorKind",
    "IdentifierCheck",
    "check_identifier",
    "correct_identifier",
    "ValidationResult",
    "validate",
    # Auto-build
    "AutoBuild",
    "BuildStrategy",
    "STRATEGIES",
    "get_strategy",
    "generate_build",
    # Build codes
    "build_code",
    "BuildCodeOverflowError",
]
