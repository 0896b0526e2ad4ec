"""
Integration tests for the gql-sdl CLI.
"""

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from graphql_sdl_render import from_introspection, utils
from graphql_sdl_render.cli import app

runner = CliRunner()


def test_render_file_to_stdout(schema_file, introspection, tmp_path):
    result = runner.invoke(app, ["render", str(schema_file), "--config", str(tmp_path / "none.yaml")])
    assert result.exit_code == 0
    assert result.stdout == from_introspection(introspection)


def test_render_file_to_out(schema_file, tmp_path):
    out = tmp_path / "schema.graphql"
    result = runner.invoke(
        app, ["render", str(schema_file), "--out", str(out), "--config", str(tmp_path / "none.yaml")]
    )
    assert result.exit_code == 0
    assert out.read_text() == "type Query {\n  id: ID\n}\n\nscalar Date\n"


def test_render_without_source_fails(tmp_path):
    result = runner.invoke(app, ["render", "--config", str(tmp_path / "none.yaml")])
    assert result.exit_code == 1


def test_render_unrecognized_node_fails(tmp_path):
    path = tmp_path / "bad.json"
    utils.write_json(str(path), {"__schema": {"directives": [], "types": [{"kind": "MYSTERY"}]}})
    result = runner.invoke(app, ["render", str(path), "--config", str(tmp_path / "none.yaml")])
    assert result.exit_code == 1


def test_render_from_profile(config_file, introspection):
    resp = MagicMock(status_code=200)
    resp.json.return_value = {"data": introspection}
    with patch("graphql_sdl_render.schema_loader.requests.post", return_value=resp) as post:
        result = runner.invoke(app, ["render", "--profile", "prod", "--config", str(config_file)])

    assert result.exit_code == 0
    assert result.stdout == from_introspection(introspection)
    args, kwargs = post.call_args
    assert args[0] == "https://prod.example.com/graphql"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"


def test_schema_pull_writes_cache(config_file, introspection, tmp_path):
    resp = MagicMock(status_code=200)
    resp.json.return_value = {"data": introspection}
    with patch("graphql_sdl_render.schema_loader.requests.post", return_value=resp):
        result = runner.invoke(
            app, ["schema", "pull", "--url", "https://api.example.com/graphql", "--config", str(config_file)]
        )

    assert result.exit_code == 0
    cached = utils.read_json(str(tmp_path / "schemas" / "api.example.com.json"))
    assert cached["schema_json"] == introspection


def test_schema_pull_to_out(config_file, introspection, tmp_path):
    out = tmp_path / "pulled.json"
    resp = MagicMock(status_code=200)
    resp.json.return_value = {"data": introspection}
    with patch("graphql_sdl_render.schema_loader.requests.post", return_value=resp):
        result = runner.invoke(app, ["schema", "pull", "--profile", "prod", "--out", str(out), "--config", str(config_file)])

    assert result.exit_code == 0
    assert utils.read_json(str(out)) == introspection


def test_schema_pull_without_url_fails(tmp_path):
    result = runner.invoke(app, ["schema", "pull", "--config", str(tmp_path / "none.yaml")])
    assert result.exit_code == 1


def test_config_init(tmp_path):
    path = tmp_path / "config.yaml"
    result = runner.invoke(app, ["config", "init", "--path", str(path)])
    assert result.exit_code == 0
    assert path.exists()
