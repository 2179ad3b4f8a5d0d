"""
Identifier validation for pre-release and build metadata.

An identifier is one dot-separated token of the pre-release or build
segment. SemVer 2.0.0 restricts identifiers to ASCII alphanumerics and
hyphens, forbids empty identifiers, and forbids leading zeros in numeric
pre-release identifiers. Each rule has a best-effort correction:

- Empty:        drop the identifier
- Invalid:      replace every disallowed character with "-"
- LeadingZero:  strip the leading zeros ("007" -> "7", "00" -> "0")
"""

import enum
import re
from typing import NamedTuple, Optional

_DISALLOWED_RE = re.compile(r"[^0-9A-Za-z-]")
_NUMERIC_RE = re.compile(r"[0-9]+")


class ErrorKind(enum.Enum):
    """Recoverable identifier problems, in reporting order."""

    EMPTY = "empty"
    INVALID = "invalid"
    LEADING_ZERO = "leading-zero"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.EMPTY: "Identifiers MUST NOT be empty.",
    ErrorKind.INVALID: (
        "Identifiers MUST comprise only ASCII alphanumerics and hyphens [0-9A-Za-z-]."
    ),
    ErrorKind.LEADING_ZERO: "Numeric identifiers MUST NOT include leading zeroes.",
}

# Reporting order for a segment's errors
ERROR_ORDER = (ErrorKind.EMPTY, ErrorKind.INVALID, ErrorKind.LEADING_ZERO)


class IdentifierCheck(NamedTuple):
    """Outcome of checking a single identifier.

    For an EMPTY identifier ``corrected`` is "" and the caller is
    expected to remove it from its segment.
    """

    ok: bool
    corrected: str
    error: Optional[ErrorKind] = None


def is_numeric(identifier: str) -> bool:
    """True when identifier consists only of ASCII digits."""
    return _NUMERIC_RE.fullmatch(identifier) is not None


def check_identifier(identifier: str, numeric_rule: bool = True) -> IdentifierCheck:
    """Check one identifier and propose a correction.

    Args:
        identifier: A single token (no dots).
        numeric_rule: Apply the leading-zero rule. True for pre-release
                      identifiers, False for build identifiers.

    Returns:
        IdentifierCheck with at most one error, chosen in the order
        Empty > Invalid > LeadingZero.
    """
    if not identifier:
        return IdentifierCheck(False, "", ErrorKind.EMPTY)

    if _DISALLOWED_RE.search(identifier):
        return IdentifierCheck(False, _DISALLOWED_RE.sub("-", identifier), ErrorKind.INVALID)

    if numeric_rule and len(identifier) > 1 and identifier.startswith("0") and is_numeric(identifier):
        return IdentifierCheck(False, identifier.lstrip("0") or "0", ErrorKind.LEADING_ZERO)

    return IdentifierCheck(True, identifier)


def correct_identifier(identifier: str, numeric_rule: bool = True) -> str:
    """Return the corrected form of identifier ("" means drop it)."""
    return check_identifier(identifier, numeric_rule).corrected
