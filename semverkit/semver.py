"""
The SemVer value type: parsing, rendering, precedence and increments.

A SemVer is a mutable record {major, minor, patch, pre_release, build}
plus an auto_build mode selecting where build metadata comes from.
Equality and ordering follow SemVer 2.0.0 precedence, so build metadata
never participates:

    >>> parse("1.0.0-alpha+001") == parse("1.0.0-alpha+exp.sha.5114f85")
    True
    >>> parse("1.0.0-beta.11") > parse("1.0.0-beta.2")
    True

parse() is lenient by default: text that does not match the grammar is
decomposed field by field instead of being rejected, and validate()
reports and repairs what is wrong with the result. Pass strict=True to
get a SemVerParseError instead.
"""

import enum
import functools
import re
import sys
from typing import Iterable, Optional, Tuple, Union

from .autobuild import AutoBuild, generate_build, get_strategy
from .build_code import build_code as _build_code
from .identifier import is_numeric

# Suggested regular expression from semver.org, with named groups
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

_DIGITS_RE = re.compile(r"[0-9]+")

CORE_FIELDS = ("major", "minor", "patch")

Identifiers = Union[str, Iterable[str], None]


class SemVerParseError(ValueError):
    """Raised by parse(strict=True) when text does not match the grammar."""

    def __init__(self, text: str):
        super().__init__(f"not a semantic version: {text!r}")
        self.text = text


class Ordering(enum.IntEnum):
    """Result of compare()."""

    LT = -1
    EQ = 0
    GT = 1


def _split_identifiers(value: Identifiers) -> Tuple[str, ...]:
    """Normalize a dot-separated string or an iterable into a tuple.

    "" and None mean "no identifiers"; "." means two empty identifiers.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.split(".")) if value else ()
    return tuple(str(ident) for ident in value)


def _check_core(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


@functools.total_ordering
class SemVer:
    """A semantic version. Defaults to 0.1.0."""

    __slots__ = ("_major", "_minor", "_patch", "_pre_release", "_build", "_auto_build")

    def __init__(
        self,
        major: int = 0,
        minor: int = 1,
        patch: int = 0,
        pre_release: Identifiers = (),
        build: Identifiers = (),
        auto_build=AutoBuild.MANUAL,
    ):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.pre_release = pre_release
        self._build = _split_identifiers(build)
        self.auto_build = auto_build

    # ── Fields ────────────────────────────────────────────────────────

    @property
    def major(self) -> int:
        return self._major

    @major.setter
    def major(self, value: int) -> None:
        self._major = _check_core("major", value)

    @property
    def minor(self) -> int:
        return self._minor

    @minor.setter
    def minor(self, value: int) -> None:
        self._minor = _check_core("minor", value)

    @property
    def patch(self) -> int:
        return self._patch

    @patch.setter
    def patch(self, value: int) -> None:
        self._patch = _check_core("patch", value)

    @property
    def pre_release(self) -> Tuple[str, ...]:
        return self._pre_release

    @pre_release.setter
    def pre_release(self, value: Identifiers) -> None:
        self._pre_release = _split_identifiers(value)

    @property
    def build(self) -> Tuple[str, ...]:
        """Build identifiers; computed by the strategy unless MANUAL."""
        generated = generate_build(self._auto_build)
        if generated is None:
            return self._build
        return generated

    @build.setter
    def build(self, value: Identifiers) -> None:
        # Read-only strategies own the field; writes are dropped
        if self.build_read_only:
            return
        self._build = _split_identifiers(value)

    @property
    def auto_build(self) -> AutoBuild:
        return self._auto_build

    @auto_build.setter
    def auto_build(self, value) -> None:
        self._auto_build = AutoBuild(value)

    @property
    def build_read_only(self) -> bool:
        return get_strategy(self._auto_build).read_only

    @property
    def core(self) -> str:
        """The MAJOR.MINOR.PATCH part."""
        return f"{self._major}.{self._minor}.{self._patch}"

    @property
    def is_pre_release(self) -> bool:
        return bool(self._pre_release)

    @property
    def build_code(self) -> int:
        return _build_code(self)

    # ── Rendering ─────────────────────────────────────────────────────

    def to_string(self) -> str:
        text = self.core
        if self._pre_release:
            text += "-" + ".".join(self._pre_release)
        build = self.build
        if build:
            text += "+" + ".".join(build)
        return text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        mode = "" if self._auto_build is AutoBuild.MANUAL else f", auto_build={self._auto_build.value!r}"
        return f"SemVer({self.to_string()!r}{mode})"

    # ── Copies & mutation ─────────────────────────────────────────────

    def clone(self) -> "SemVer":
        """Return an independent copy, including the stored manual build."""
        other = SemVer.__new__(SemVer)
        other._major = self._major
        other._minor = self._minor
        other._patch = self._patch
        other._pre_release = self._pre_release
        other._build = self._build
        other._auto_build = self._auto_build
        return other

    def increment_major(self) -> "SemVer":
        """Increment major, reset minor and patch to 0."""
        self._major += 1
        self._minor = 0
        self._patch = 0
        return self

    def increment_minor(self) -> "SemVer":
        """Increment minor, reset patch to 0."""
        self._minor += 1
        self._patch = 0
        return self

    def increment_patch(self) -> "SemVer":
        self._patch += 1
        return self

    def validate(self):
        """Shortcut for semverkit.validation.validate(self)."""
        from .validation import validate
        return validate(self)

    # ── Precedence ────────────────────────────────────────────────────

    def _precedence_key(self) -> tuple:
        # A release sorts after every pre-release of the same core.
        # Numeric identifiers sort before alphanumeric ones and compare by
        # digit count, then digits, so no int conversion limit applies.
        # A shorter run of identifiers sorts first when it is a prefix.
        identifiers = tuple(
            _numeric_key(ident) if is_numeric(ident) else (1, ident)
            for ident in self._pre_release
        )
        return (self._major, self._minor, self._patch, not self._pre_release, identifiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence_key() == other._precedence_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemVer):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    __hash__ = None


def _numeric_key(ident: str) -> tuple:
    digits = ident.lstrip("0") or "0"
    return (0, len(digits), digits)


def _numeral(text: str) -> Optional[int]:
    """Convert a run of ASCII digits to an int.

    Returns None for anything else, including numerals longer than the
    interpreter's int/str conversion limit (4300 digits by default).
    """
    if not isinstance(text, str) or not _DIGITS_RE.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


def compare(a: SemVer, b: SemVer) -> Ordering:
    """Compare two versions by SemVer precedence, ignoring build metadata."""
    key_a = a._precedence_key()
    key_b = b._precedence_key()
    if key_a < key_b:
        return Ordering.LT
    if key_a > key_b:
        return Ordering.GT
    return Ordering.EQ


def is_canonical(text: str) -> bool:
    """True when text matches the SemVer 2.0.0 grammar exactly."""
    return SEMVER_PATTERN.fullmatch(text) is not None


def parse(text: str, strict: bool = False) -> SemVer:
    """Parse text into a SemVer.

    Args:
        text: Version text, e.g. "1.2.3-rc.1+build.5".
        strict: Raise SemVerParseError when text does not match the
                grammar, instead of decomposing it leniently.

    Never raises unless strict is set. A core numeral too long for int
    conversion (over 4300 digits on Python 3.11+) counts as a mismatch:
    strict mode raises SemVerParseError, lenient mode reads it as 0.

    Lenient decomposition of non-matching text (deterministic):
      - surrounding whitespace is stripped
      - build is everything after the first "+", pre-release everything
        between the first "-" and the build; a separator followed by
        nothing yields one empty identifier
      - the first three dot-separated core parts become major, minor and
        patch when they are plain digits, and 0 otherwise; further core
        parts are dropped
    """
    match = SEMVER_PATTERN.fullmatch(text)
    if match:
        numbers = [_numeral(match.group(field)) for field in CORE_FIELDS]
        if None not in numbers:
            return SemVer(
                *numbers,
                pre_release=match.group("prerelease"),
                build=match.group("build"),
            )
    if strict:
        raise SemVerParseError(text)
    return _parse_lenient(text)


def _parse_lenient(text: str) -> SemVer:
    rest, plus, build = text.strip().partition("+")
    core, dash, pre_release = rest.partition("-")

    numbers = []
    parts = core.split(".")
    for i in range(len(CORE_FIELDS)):
        part = parts[i].strip() if i < len(parts) else ""
        value = _numeral(part)
        numbers.append(0 if value is None else value)

    version = SemVer(*numbers)
    if dash:
        version.pre_release = tuple(pre_release.split("."))
    if plus:
        version.build = tuple(build.split("."))
    return version


def assign_numeral(version: SemVer, field: str, text: str) -> bool:
    """Set major, minor or patch from user-entered text.

    Only plain ASCII digits are accepted. Anything else (signs, spaces,
    underscores, non-ASCII digits) leaves the field unchanged and prints
    a warning. Returns True when the field was updated.
    """
    if field not in CORE_FIELDS:
        raise ValueError(f"unknown version field {field!r}, expected one of {', '.join(CORE_FIELDS)}")
    if isinstance(text, str) and text.startswith("-") and _DIGITS_RE.fullmatch(text[1:]):
        _warn("a version must not be negative")
        return False
    value = _numeral(text)
    if value is None:
        _warn(f"{field}: {text!r} is not a number")
        return False
    setattr(version, field, value)
    return True


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    print(f"semverkit: {msg}", file=sys.stderr)
