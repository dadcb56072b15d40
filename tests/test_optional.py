import pytest

from readdata import (
    ReadError,
    optional,
    read_optional_cson,
    read_optional_data,
    read_optional_ini,
    read_optional_json,
    read_optional_toml,
    read_optional_yaml,
    read_yaml_sync,
)

_OPTIONAL_READERS = [
    read_optional_json,
    read_optional_yaml,
    read_optional_ini,
    read_optional_toml,
    read_optional_cson,
    read_optional_data,
]


@pytest.mark.parametrize("reader", _OPTIONAL_READERS)
def test_missing_file_returns_empty_dict(reader, tmp_path):
    """Test that a missing file yields an empty mapping instead of an error."""
    assert reader(tmp_path / "missing.file") == {}


@pytest.mark.parametrize("reader", _OPTIONAL_READERS)
def test_directory_returns_empty_dict(reader, tmp_path):
    assert reader(tmp_path) == {}


@pytest.mark.parametrize(
    ("reader", "filename"),
    [
        (read_optional_json, "invalid.json"),
        (read_optional_yaml, "invalid.yaml"),
        (read_optional_yaml, "index.js"),
        (read_optional_ini, "invalid.ini"),
        (read_optional_toml, "invalid.toml"),
        (read_optional_cson, "invalid.cson"),
        (read_optional_data, "notes.txt"),
    ],
)
def test_malformed_file_returns_empty_dict(reader, filename, test_data_path):
    assert reader(test_data_path / filename) == {}


@pytest.mark.parametrize(
    ("reader", "content"),
    [
        (read_optional_json, "[" * 200_000 + "]" * 200_000),
        (read_optional_yaml, "[" * 5_000 + "]" * 5_000),
    ],
)
def test_deeply_nested_file_returns_empty_dict(reader, content, tmp_path):
    """Test that nesting beyond the recursion limit does not escape."""
    path = tmp_path / "deep.data"
    path.write_text(content)
    assert reader(path) == {}


def test_unknown_encoding_returns_empty_dict(test_data_path):
    assert read_optional_json(test_data_path / "test.json", "no-such-codec") == {}


def test_valid_files_are_read(test_data_path):
    assert read_optional_json(test_data_path / "test.json") == {"a": {"b": "c"}}
    assert read_optional_yaml(test_data_path / "test.yaml", schema="failsafe") == {
        "a": {"b": "c", "d": "true"}
    }
    assert read_optional_data(test_data_path / "notes.txt", lang="yaml") == {"a": {"b": "c"}}


def test_empty_result_is_a_fresh_dict(tmp_path):
    """Test that callers can mutate the empty result safely."""
    first = read_optional_json(tmp_path / "missing.json")
    first["key"] = "value"
    assert read_optional_json(tmp_path / "missing.json") == {}


def test_optional_wrapper_names():
    assert read_optional_json.__name__ == "read_optional_json"
    assert "read_json_sync" in read_optional_json.__doc__


def test_optional_wraps_any_reader(tmp_path):
    """Test that optional() can wrap an arbitrary reader."""
    calls = []

    def _reader(path, options=None, **kwargs):
        calls.append((path, options, kwargs))
        raise ReadError(2, "No such file or directory", str(path))

    safe_reader = optional(_reader)
    assert safe_reader(tmp_path / "x", {"a": 1}, b=2) == {}
    assert calls == [(tmp_path / "x", {"a": 1}, {"b": 2})]
    assert optional(read_yaml_sync).__name__ == "read_yaml_sync"
