import pytest

from readdata import Format, resolve_format
from readdata.options import set_readdata_option


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        (".json", Format.JSON),
        (".yaml", Format.YAML),
        (".yml", Format.YAML),
        (".ini", Format.INI),
        (".toml", Format.TOML),
        (".cson", Format.CSON),
        ("yaml", Format.YAML),  # Leading dot is optional
        (".YML", Format.YAML),  # Case-insensitive
        (".Json", Format.JSON),
        (".txt", Format.JSON),  # Unknown falls back to json
        ("", Format.JSON),  # Missing falls back to json
        (None, Format.JSON),
    ],
)
def test_from_extension(extension, expected):
    """Test the total mapping from extensions to formats."""
    assert Format.from_extension(extension) is expected


def test_from_hint_unknown_returns_none():
    """Test that unknown hints are reported as None rather than raising."""
    assert Format.from_hint("xml") is None
    assert Format.from_hint("") is None
    assert Format.from_hint(" YAML ") is Format.YAML


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("config.yaml", Format.YAML),
        ("dir.d/config.toml", Format.TOML),
        ("archive.tar.json", Format.JSON),  # Only the last suffix counts
        ("archive.json.yml", Format.YAML),
        ("Makefile", Format.JSON),
        ("CONFIG.INI", Format.INI),
        (".hidden", Format.JSON),  # Dotfiles have no suffix
    ],
)
def test_resolve_format_from_path(path, expected):
    """Test that the format is resolved from the path's last suffix."""
    assert resolve_format(path) is expected


def test_resolve_format_hint_overrides_extension():
    """Test that an explicit hint wins over the extension."""
    assert resolve_format("notes.txt", "yaml") is Format.YAML
    assert resolve_format("data.json", "yml") is Format.YAML
    assert resolve_format("data.yaml", ".TOML") is Format.TOML


def test_resolve_format_unknown_hint_falls_back_to_default():
    """Test that an unknown hint behaves like an unknown extension."""
    assert resolve_format("data.yaml", "xml") is Format.JSON


def test_resolve_format_empty_hint_uses_extension():
    assert resolve_format("data.yaml", "") is Format.YAML


def test_resolve_format_uses_default_format_option():
    """Test that the fallback format follows the package option."""
    set_readdata_option("default_format", "yaml")
    assert resolve_format("notes.txt") is Format.YAML
    assert resolve_format("notes.json") is Format.JSON


@pytest.mark.parametrize("lang", [1, 0, ["yaml"]])
def test_resolve_format_non_string_hint(lang):
    """Test that a hint which is not a string is rejected."""
    with pytest.raises(TypeError, match="Format hint must be a string"):
        resolve_format("data.yaml", lang)
