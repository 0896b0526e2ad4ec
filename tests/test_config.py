"""
Configuration loading tests.
"""

import pytest

from graphql_sdl_render import config


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load(str(tmp_path / "missing.yaml"))
    assert cfg.default_url is None
    assert cfg.token is None
    assert cfg.timeout == 30
    assert cfg.profiles == []
    assert not cfg.schema_cache_dir.startswith("~")


def test_load_from_yaml(config_file, tmp_path):
    cfg = config.load(str(config_file))
    assert cfg.schema_cache_dir == str(tmp_path / "schemas")
    assert cfg.headers == {"X-Client": "tests"}
    assert cfg.timeout == 30


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert config.load(str(path)).profiles == []


def test_profile_lookup(config_file):
    cfg = config.load(str(config_file))
    assert cfg.profile("prod")["url"] == "https://prod.example.com/graphql"


def test_unknown_profile(config_file):
    cfg = config.load(str(config_file))
    with pytest.raises(KeyError):
        cfg.profile("staging")


def test_example_config_loads(tmp_path):
    path = config.create_example_config(str(tmp_path / "nested" / "config.yaml"))
    cfg = config.load(path)
    assert cfg.default_url == "https://api.example.com/graphql"
    assert [p["name"] for p in cfg.profiles] == ["prod", "dev"]
