"""
Configuration management for semverkit.

Loads settings from ~/.semverkit/config.toml (or SEMVERKIT_HOME/config.toml),
falls back to defaults when the file doesn't exist, and supports
CLI flag overrides via Config.with_overrides().
"""

import dataclasses
import sys
from pathlib import Path
from typing import Optional

from ._paths import get_config_path
from .autobuild import AutoBuild


# Default configuration values
_DEFAULTS = {
    "build": {
        "auto": AutoBuild.MANUAL.value,
    },
    "parse": {
        "strict": False,
    },
    "output": {
        "quiet": False,
    },
}


@dataclasses.dataclass(frozen=True)
class Config:
    """Immutable configuration object."""

    build_auto: str = AutoBuild.MANUAL.value
    parse_strict: bool = False
    output_quiet: bool = False

    def with_overrides(self, **kwargs) -> "Config":
        """Return a new Config with specified fields overridden.

        Only applies overrides for non-None values, so CLI flags
        that weren't specified don't clobber config file values.
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}
        return dataclasses.replace(self, **updates) if updates else self


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load config from TOML file, falling back to defaults.

    Args:
        config_path: Explicit path to config file. If None, uses
                     SEMVERKIT_HOME/config.toml or ~/.semverkit/config.toml.

    Returns:
        Config dataclass with merged values.
    """
    path = config_path or get_config_path()

    if not path.is_file():
        return Config()

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        _warn(f"Could not read config file {path}: {e}")
        return Config()

    try:
        parsed = _parse_toml(text)
    except Exception as e:
        _warn(f"Could not parse config file {path}: {e}")
        return Config()

    return _build_config(parsed)


def _parse_toml(text: str) -> dict:
    """Parse TOML text using tomllib (3.11+) or tomli."""
    if sys.version_info >= (3, 11):
        import tomllib
        return tomllib.loads(text)
    else:
        import tomli
        return tomli.loads(text)


def _build_config(parsed: dict) -> Config:
    """Build a Config from parsed TOML dict, using defaults for missing keys."""
    def _get(section: str, key: str, default):
        val = parsed.get(section, {}).get(key, default)
        if isinstance(default, bool):
            if isinstance(val, str):
                return val.lower() in ("true", "1", "yes")
            return bool(val)
        return str(val)

    build_auto = _get("build", "auto", _DEFAULTS["build"]["auto"])
    try:
        build_auto = AutoBuild(build_auto).value
    except ValueError:
        valid = ", ".join(mode.value for mode in AutoBuild)
        _warn(f"unknown build.auto {build_auto!r} (expected one of {valid}), using manual")
        build_auto = AutoBuild.MANUAL.value

    return Config(
        build_auto=build_auto,
        parse_strict=_get("parse", "strict", _DEFAULTS["parse"]["strict"]),
        output_quiet=_get("output", "quiet", _DEFAULTS["output"]["quiet"]),
    )


def format_config(config: Config, config_path: Optional[Path] = None) -> str:
    """Format config for display (used by --config flag)."""
    path = config_path or get_config_path()
    lines = [
        f"Config file: {path}",
        f"  exists: {'yes' if path.is_file() else 'no'}",
        "",
        "[build]",
        f"  auto = {config.build_auto}",
        "",
        "[parse]",
        f"  strict = {str(config.parse_strict).lower()}",
        "",
        "[output]",
        f"  quiet = {str(config.output_quiet).lower()}",
    ]
    return "\n".join(lines)


def _warn(msg: str) -> None:
    """Print a warning to stderr."""
    print(f"semverkit: config: {msg}", file=sys.stderr)
