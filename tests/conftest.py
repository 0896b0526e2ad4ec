import json

import pytest
import yaml

from builders import field, named, object_type, payload, scalar_type


@pytest.fixture
def introspection():
    return payload(types=[object_type("Query", [field("id", named("ID"))]), scalar_type("Date")])


@pytest.fixture
def schema_file(tmp_path, introspection):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(introspection))
    return path


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "schema_cache_dir": str(tmp_path / "schemas"),
                "headers": {"X-Client": "tests"},
                "profiles": [{"name": "prod", "url": "https://prod.example.com/graphql", "token": "secret"}],
            }
        )
    )
    return path
