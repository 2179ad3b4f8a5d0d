"""Tests for semverkit CLI."""

import re

from semverkit import __version__


def test_version_flag(run_semverkit):
    """semverkit --version should print version string and exit 0."""
    result = run_semverkit(["--version"])
    assert result.returncode == 0
    assert result.stdout.strip() == f"semverkit {__version__}"


def test_help_flag(run_semverkit):
    """--help lists the positional and the options."""
    result = run_semverkit(["--help"])
    assert result.returncode == 0
    assert "VERSION" in result.stdout
    assert "--bump" in result.stdout


def test_missing_version_is_usage_error(run_semverkit):
    """No VERSION is a usage error (exit 2)."""
    result = run_semverkit([])
    assert result.returncode == 2
    assert "VERSION is required" in result.stderr


def test_print_canonical(run_semverkit):
    """A bare version is printed back."""
    result = run_semverkit(["1.2.3-rc.1+b.5"])
    assert result.returncode == 0
    assert result.stdout == "1.2.3-rc.1+b.5\n"


def test_check_valid(run_semverkit):
    """--check on a valid version exits 0."""
    result = run_semverkit(["1.0.0-alpha+001", "--check"])
    assert result.returncode == 0
    assert "valid" in result.stdout


def test_check_invalid(run_semverkit):
    """--check reports problems and exits 1."""
    result = run_semverkit(["1.0.0-01", "--check"])
    assert result.returncode == 1
    assert "leading zeroes" in result.stderr
    assert "suggested: 1.0.0-1" in result.stdout


def test_fix(run_semverkit):
    """--fix prints the corrected version."""
    result = run_semverkit(["1.0.0-a a..b+x$y", "--fix"])
    assert result.returncode == 0
    assert result.stdout == "1.0.0-a-a.b+x-y\n"
    assert "fixed:" in result.stderr


def test_fix_quiet(run_semverkit):
    """-q suppresses the fix messages."""
    result = run_semverkit(["1.0.0-01", "--fix", "-q"])
    assert result.stdout == "1.0.0-1\n"
    assert result.stderr == ""


def test_compare(run_semverkit):
    """--compare prints <, = or >."""
    assert run_semverkit(["1.0.0-rc.1", "--compare", "1.0.0"]).stdout == "<\n"
    assert run_semverkit(["1.0.0+a", "--compare", "1.0.0+b"]).stdout == "=\n"
    assert run_semverkit(["1.0.0-beta.11", "-c", "1.0.0-beta.2"]).stdout == ">\n"


def test_bump(run_semverkit):
    """--bump increments the named field."""
    assert run_semverkit(["1.2.3", "--bump", "major"]).stdout == "2.0.0\n"
    assert run_semverkit(["1.2.3", "--bump", "minor"]).stdout == "1.3.0\n"
    assert run_semverkit(["1.2.3", "--bump", "patch"]).stdout == "1.2.4\n"


def test_core(run_semverkit):
    """--core prints MAJOR.MINOR.PATCH only."""
    assert run_semverkit(["4.5.6-alpha+CustomBuild3", "--core"]).stdout == "4.5.6\n"


def test_build_code(run_semverkit):
    """--build-code prints the integer code."""
    result = run_semverkit(["1.2.3-alpha", "--build-code"])
    assert result.returncode == 0
    assert result.stdout == "10203\n"


def test_build_code_overflow(run_semverkit):
    """--build-code exits 1 when the code does not fit."""
    result = run_semverkit(["1.100.0", "--build-code"])
    assert result.returncode == 1
    assert "does not fit" in result.stderr


def test_strict_rejects_malformed(run_semverkit):
    """--strict exits 1 on malformed text."""
    result = run_semverkit(["1.2", "--strict"])
    assert result.returncode == 1
    assert "not a semantic version" in result.stderr


def test_lenient_by_default(run_semverkit):
    """Malformed text parses leniently without --strict."""
    result = run_semverkit(["1.2"])
    assert result.returncode == 0
    assert result.stdout == "1.2.0\n"


def test_auto_build_timestamp(run_semverkit):
    """--auto-build timestamp replaces the build."""
    result = run_semverkit(["1.2.3+old", "--auto-build", "timestamp"])
    assert result.returncode == 0
    assert re.fullmatch(r"1\.2\.3\+\d{14}\n", result.stdout)


def test_config_file_sets_strict(run_semverkit):
    """[parse] strict in config.toml turns on strict parsing."""
    run_semverkit.home.mkdir(parents=True)
    (run_semverkit.home / "config.toml").write_text("[parse]\nstrict = true\n", encoding="utf-8")
    result = run_semverkit(["garbage"])
    assert result.returncode == 1


def test_show_config(run_semverkit):
    """--config shows the effective configuration."""
    result = run_semverkit(["--config", "--auto-build", "git-commit"])
    assert result.returncode == 0
    assert "[build]" in result.stdout
    assert "auto = git-commit" in result.stdout
