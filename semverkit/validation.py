"""
Validation and auto-correction of SemVer values.

validate() never raises and never mutates its input. It returns a
corrected copy plus the list of problems found. Errors are reported per
segment: first the pre-release segment, then the build segment, each
listing Empty, Invalid and LeadingZero at most once and in that order.
"""

import dataclasses
from typing import List, Tuple

from .identifier import ERROR_ORDER, ErrorKind, check_identifier
from .semver import SemVer


@dataclasses.dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate()."""

    is_valid: bool
    corrected: SemVer
    errors: Tuple[ErrorKind, ...] = ()

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


def correct_identifiers(
    identifiers: Tuple[str, ...],
    numeric_rule: bool = True,
) -> Tuple[Tuple[str, ...], Tuple[ErrorKind, ...]]:
    """Correct every identifier of one segment.

    Returns the corrected identifiers (empty ones removed) and the
    distinct errors found, in reporting order.
    """
    corrected = []
    found = set()
    for identifier in identifiers:
        check = check_identifier(identifier, numeric_rule)
        if check.error is not None:
            found.add(check.error)
        if check.error is ErrorKind.EMPTY:
            continue
        corrected.append(check.corrected)
    errors = tuple(kind for kind in ERROR_ORDER if kind in found)
    return tuple(corrected), errors


def validate(version: SemVer) -> ValidationResult:
    """Check version against the SemVer grammar and build a corrected copy."""
    corrected = version.clone()
    errors = []

    pre_release, pre_errors = correct_identifiers(corrected.pre_release, numeric_rule=True)
    corrected.pre_release = pre_release
    errors.extend(pre_errors)

    # Generated build metadata is sanitized by its strategy
    if not corrected.build_read_only:
        build, build_errors = correct_identifiers(corrected.build, numeric_rule=False)
        corrected.build = build
        errors.extend(build_errors)

    return ValidationResult(
        is_valid=not errors,
        corrected=corrected,
        errors=tuple(errors),
    )
