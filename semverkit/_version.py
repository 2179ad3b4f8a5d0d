"""
Version information for semverkit.

This file is the canonical source for version numbers.
To bump version: edit MAJOR, MINOR, PATCH (and PHASE) below.

Format: MAJOR.MINOR.PATCH[-PHASE]
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc.1", etc.

__app_name__ = "semverkit"


def get_version():
    """Return the SemVer string (MAJOR.MINOR.PATCH[-PHASE])."""
    version = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        version = f"{version}-{PHASE}"
    return version


def get_pip_version():
    """
    Return PEP 440 compliant version for pip/setuptools.

    - 0.1.0        -> 0.1.0
    - 0.1.0-alpha  -> 0.1.0a0
    - 0.1.0-rc.1   -> 0.1.0rc1
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if not PHASE:
        return base

    name, _, number = PHASE.partition(".")
    phase_map = {"alpha": "a", "beta": "b", "rc": "rc"}
    return f"{base}{phase_map.get(name, name)}{number or 0}"


__version__ = get_version()

# For convenience in imports
VERSION = __version__
PIP_VERSION = get_pip_version()
