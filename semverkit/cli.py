"""
Command-line interface for semverkit.

Usage:
    semverkit 1.2.3-rc.1+b.5           # print canonical form
    semverkit "1.0.0-01" --check       # report problems, exit 1 if invalid
    semverkit "1.0.0-a a" --fix        # print corrected version
    semverkit 1.2.3 --bump minor       # 1.3.0
    semverkit 1.0.0-rc.1 --compare 1.0.0
    semverkit 1.2.3 --build-code       # 10203
    semverkit --version                # show version
"""

import argparse
import sys

from ._version import __version__
from .autobuild import AutoBuild


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    modes = [mode.value for mode in AutoBuild]

    p = argparse.ArgumentParser(
        prog="semverkit",
        description=(
            "Parse, validate, correct and compare Semantic Versions (SemVer 2.0.0)."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  semverkit 1.2.3-rc.1+b.5                 # print canonical form\n"
            "  semverkit 1.0.0-01 --check               # exit 1, leading zero\n"
            "  semverkit '1.0.0-a a' --fix              # 1.0.0-a-a\n"
            "  semverkit 1.2.3 --bump major             # 2.0.0\n"
            "  semverkit 1.0.0-rc.1 --compare 1.0.0     # <\n"
            "  semverkit 1.2.3 --build-code             # 10203\n"
            "  semverkit 1.2.3 --auto-build timestamp   # 1.2.3+20260101120000\n"
        ),
    )

    p.add_argument(
        "text",
        nargs="?",
        metavar="VERSION",
        help="version text, e.g. 1.2.3-rc.1+build.5",
    )

    p.add_argument(
        "--check",
        action="store_true",
        help="validate VERSION; print problems and exit 1 if it is not valid",
    )

    p.add_argument(
        "--fix",
        action="store_true",
        help="print the corrected form of VERSION",
    )

    p.add_argument(
        "--compare", "-c",
        metavar="OTHER",
        help="compare VERSION with OTHER by precedence; prints <, = or >",
    )

    p.add_argument(
        "--bump", "-b",
        choices=["major", "minor", "patch"],
        help="increment a field (lower fields reset to 0) and print the result",
    )

    p.add_argument(
        "--core",
        action="store_true",
        help="print only MAJOR.MINOR.PATCH",
    )

    p.add_argument(
        "--build-code",
        action="store_true",
        help="print the integer build code (major*10000 + minor*100 + patch)",
    )

    p.add_argument(
        "--auto-build", "-A",
        choices=modes,
        metavar="MODE",
        help=f"build metadata source: {', '.join(modes)}",
    )

    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="reject VERSION if it does not match the SemVer grammar",
    )

    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="suppress warning messages",
    )

    p.add_argument(
        "--config",
        action="store_true",
        dest="show_config",
        help="show current configuration",
    )

    p.add_argument(
        "--version", "-V",
        action="version",
        version=f"semverkit {__version__}",
    )

    return p


def main(argv=None):
    """Main entry point.

    Dispatch priority: config → check → fix → compare → bump → core
    → build-code → print.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config and apply CLI overrides
    from .config import load_config
    config = load_config()
    config = config.with_overrides(
        output_quiet=args.quiet or None,
        parse_strict=args.strict,
        build_auto=args.auto_build,
    )

    # --config: show effective configuration
    if args.show_config:
        _cmd_config(config)
        return

    if args.text is None:
        parser.error("VERSION is required")

    version = _parse_or_exit(args.text, config)
    version.auto_build = config.build_auto

    if args.check:
        _cmd_check(version)
        return

    if args.fix:
        _cmd_fix(version, config)
        return

    if args.compare is not None:
        _cmd_compare(version, _parse_or_exit(args.compare, config))
        return

    if args.bump:
        getattr(version, f"increment_{args.bump}")()
        print(version)
        return

    if args.core:
        print(version.core)
        return

    if args.build_code:
        _cmd_build_code(version)
        return

    print(version)


def _parse_or_exit(text, config):
    """Parse text per config, exiting with status 1 on a strict failure."""
    from .semver import parse, SemVerParseError
    try:
        return parse(text, strict=config.parse_strict)
    except SemVerParseError as e:
        print(f"semverkit: {e}", file=sys.stderr)
        sys.exit(1)


def _cmd_config(config):
    """Show effective configuration."""
    from .config import format_config
    print(format_config(config))


def _cmd_check(version):
    """Validate and exit non-zero when invalid."""
    result = version.validate()
    if result.is_valid:
        print(f"{version}: valid")
        return

    for message in result.messages:
        print(f"semverkit: {message}", file=sys.stderr)
    print(f"{version}: invalid (suggested: {result.corrected})")
    sys.exit(1)


def _cmd_fix(version, config):
    """Print the corrected version."""
    result = version.validate()
    if not config.output_quiet:
        for message in result.messages:
            print(f"semverkit: fixed: {message}", file=sys.stderr)
    print(result.corrected)


def _cmd_compare(version, other):
    """Print <, = or > for VERSION relative to OTHER."""
    from .semver import compare, Ordering
    symbols = {Ordering.LT: "<", Ordering.EQ: "=", Ordering.GT: ">"}
    print(symbols[compare(version, other)])


def _cmd_build_code(version):
    """Print the integer build code."""
    from .build_code import BuildCodeOverflowError
    try:
        print(version.build_code)
    except BuildCodeOverflowError as e:
        print(f"semverkit: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
