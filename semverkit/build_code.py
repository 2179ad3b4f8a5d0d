"""
Integer build codes for release pipelines that need a monotonically
increasing number (e.g. the Android bundle versionCode).

    code = major * 10000 + minor * 100 + patch

Minor and patch each get two decimal digits. Values that do not fit
would make the code collide with, or sort before, other versions, so
they raise BuildCodeOverflowError instead of wrapping.
"""

# Largest versionCode Google Play accepts
MAX_BUILD_CODE = 2_100_000_000

MAJOR_WEIGHT = 10_000
MINOR_WEIGHT = 100


class BuildCodeOverflowError(ValueError):
    """Raised when a version cannot be encoded without ambiguity."""
    pass


def build_code(version) -> int:
    """Return the integer build code for version (pre-release and build ignored)."""
    if version.minor >= MINOR_WEIGHT:
        raise BuildCodeOverflowError(
            f"minor version {version.minor} does not fit in a build code (max {MINOR_WEIGHT - 1})"
        )
    if version.patch >= MINOR_WEIGHT:
        raise BuildCodeOverflowError(
            f"patch version {version.patch} does not fit in a build code (max {MINOR_WEIGHT - 1})"
        )
    code = version.major * MAJOR_WEIGHT + version.minor * MINOR_WEIGHT + version.patch
    if code > MAX_BUILD_CODE:
        raise BuildCodeOverflowError(f"build code {code} exceeds {MAX_BUILD_CODE}")
    return code
