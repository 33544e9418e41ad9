import tomllib

import pytest

from tinytemple.config import load_config
from tinytemple.errors import ConfigParseError, ConfigReadError, FatalError


def test_load_toml_config_matches_file(tmp_path):
    path = tmp_path / "tinytemple.toml"
    path.write_text(
        'title = "Hi"\n'
        "year = 2024\n"
        "draft = false\n"
        'tags = ["a", "b"]\n'
        "\n"
        "[author]\n"
        'name = "Ada"\n',
        encoding="utf-8",
    )
    config = load_config(path)
    assert config == {
        "title": "Hi",
        "year": 2024,
        "draft": False,
        "tags": ["a", "b"],
        "author": {"name": "Ada"},
    }


def test_load_yaml_config(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("title: Hi\nnav:\n  - home\n  - about\n", encoding="utf-8")
    assert load_config(path) == {"title": "Hi", "nav": ["home", "about"]}


def test_empty_yaml_config_is_empty_context(tmp_path):
    path = tmp_path / "site.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


def test_yaml_config_must_be_mapping(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config(path)


def test_invalid_yaml_config(tmp_path):
    path = tmp_path / "site.yaml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config(path)


def test_missing_config_is_read_error(tmp_path):
    path = tmp_path / "missing.toml"
    with pytest.raises(ConfigReadError) as excinfo:
        load_config(path)
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert isinstance(excinfo.value, FatalError)


def test_directory_config_is_read_error(tmp_path):
    with pytest.raises(ConfigReadError):
        load_config(tmp_path)


def test_invalid_toml_is_parse_error(tmp_path):
    path = tmp_path / "tinytemple.toml"
    path.write_text("title = \n", encoding="utf-8")
    with pytest.raises(ConfigParseError) as excinfo:
        load_config(path)
    assert isinstance(excinfo.value.cause, tomllib.TOMLDecodeError)
    assert excinfo.value.message == "Unable to parse config file."
