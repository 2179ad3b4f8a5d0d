"""Tests for semverkit configuration loading."""

from semverkit.config import Config, load_config, format_config


def test_default_config_when_no_file(semverkit_home):
    """When no config.toml exists, all defaults are applied."""
    config = load_config()
    assert config.build_auto == "manual"
    assert config.parse_strict is False
    assert config.output_quiet is False


def test_load_valid_config(config_file):
    """Valid TOML file is parsed correctly."""
    config_file(
        '[build]\n'
        'auto = "git-commit"\n'
        '\n'
        '[parse]\n'
        'strict = true\n'
    )
    config = load_config()
    assert config.build_auto == "git-commit"
    assert config.parse_strict is True


def test_partial_config_uses_defaults(config_file):
    """Config with only some keys uses defaults for the rest."""
    config_file('[output]\nquiet = true\n')
    config = load_config()
    assert config.output_quiet is True
    assert config.build_auto == "manual"   # default
    assert config.parse_strict is False    # default section missing entirely


def test_empty_config_file(config_file):
    """Empty config.toml uses all defaults."""
    config_file("")
    assert load_config() == Config()


def test_string_booleans_are_coerced(config_file):
    """String booleans like "yes" are accepted."""
    config_file('[parse]\nstrict = "yes"\n')
    assert load_config().parse_strict is True


def test_unknown_auto_build_falls_back_to_manual(config_file, capsys):
    """An unknown build mode warns and uses manual."""
    config_file('[build]\nauto = "nightly"\n')
    config = load_config()
    assert config.build_auto == "manual"
    assert "nightly" in capsys.readouterr().err


def test_malformed_toml_falls_back_to_defaults(config_file, capsys):
    """Unparsable TOML warns and uses defaults."""
    config_file("[build\nauto = \n")
    assert load_config() == Config()
    assert "Could not parse config file" in capsys.readouterr().err


def test_explicit_config_path(tmp_path):
    """An explicit path overrides the default location."""
    path = tmp_path / "custom.toml"
    path.write_text('[build]\nauto = "timestamp"\n', encoding="utf-8")
    assert load_config(path).build_auto == "timestamp"


def test_cli_overrides():
    """with_overrides() replaces only non-None values."""
    config = Config(build_auto="git-commit")
    updated = config.with_overrides(output_quiet=True, build_auto=None, parse_strict=None)
    assert updated.output_quiet is True
    assert updated.build_auto == "git-commit"
    assert config.output_quiet is False  # original untouched


def test_with_overrides_no_changes_returns_same():
    """with_overrides() with nothing to change returns self."""
    config = Config()
    assert config.with_overrides(output_quiet=None) is config


def test_format_config(semverkit_home):
    """format_config() shows path, existence and values."""
    text = format_config(Config(build_auto="timestamp", parse_strict=True))
    assert "config.toml" in text
    assert "exists: no" in text
    assert "auto = timestamp" in text
    assert "strict = true" in text
    assert "quiet = false" in text
