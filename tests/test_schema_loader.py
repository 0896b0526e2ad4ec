"""
Schema loading tests. HTTP is mocked.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from graphql_sdl_render import config, schema_loader, utils


def _response(status=200, body=None, text=None):
    resp = MagicMock()
    resp.status_code = status
    resp.url = "https://api.example.com/graphql"
    resp.headers = {"Content-Type": "text/html"}
    if text is not None:
        resp.text = text
        resp.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
    else:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    return resp


@pytest.fixture
def cfg(config_file):
    return config.load(str(config_file))


def test_load_from_file(schema_file, introspection):
    prof = schema_loader.load_schema(schema_file=str(schema_file))
    assert prof.schema_json == introspection
    assert prof.url == f"file://{schema_file}"
    assert prof.hash == utils.sha256(introspection)


def test_requires_a_source():
    with pytest.raises(ValueError):
        schema_loader.load_schema()


def test_introspect_sends_query_and_headers(cfg, introspection):
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(body={"data": introspection})
        result = schema_loader.introspect("https://api.example.com/graphql", "secret", cfg)

    assert result == introspection
    _, kwargs = post.call_args
    assert kwargs["json"] == {"query": utils.INTROSPECTION_QUERY}
    assert kwargs["headers"] == {"X-Client": "tests", "Authorization": "Bearer secret"}
    assert kwargs["timeout"] == 30


def test_introspect_http_error(cfg):
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(status=500, body={})
        with pytest.raises(RuntimeError, match="status 500"):
            schema_loader.introspect("https://api.example.com/graphql", None, cfg)


def test_introspect_graphql_errors(cfg):
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(body={"errors": [{"message": "introspection disabled"}]})
        with pytest.raises(RuntimeError, match="introspection disabled"):
            schema_loader.introspect("https://api.example.com/graphql", None, cfg)


def test_introspect_non_json(cfg):
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(text="<html>login</html>")
        with pytest.raises(RuntimeError, match="non-JSON response"):
            schema_loader.introspect("https://api.example.com/graphql", None, cfg)


def test_fetch_is_cached(cfg, introspection):
    url = "https://api.example.com/graphql"
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(body={"data": introspection})
        first = schema_loader.load_schema(url=url, cfg=cfg)
        second = schema_loader.load_schema(url=url, cfg=cfg)

    assert post.call_count == 1
    assert second == first
    assert Path(schema_loader.cache_path_for(url, cfg)).exists()


def test_refresh_bypasses_cache(cfg, introspection):
    url = "https://api.example.com/graphql"
    with patch("graphql_sdl_render.schema_loader.requests.post") as post:
        post.return_value = _response(body={"data": introspection})
        schema_loader.load_schema(url=url, cfg=cfg)
        schema_loader.load_schema(url=url, cfg=cfg, refresh=True)

    assert post.call_count == 2


def test_cache_path_uses_host(cfg, tmp_path):
    path = schema_loader.cache_path_for("https://api.example.com:8443/graphql", cfg)
    assert path == str(tmp_path / "schemas" / "api.example.com.json")
