"""Introspection loading: from a JSON file, a cache, or a live endpoint."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import requests

from . import utils
from .config import Config

logger = logging.getLogger(__name__)


@dataclass
class SchemaProfile:
    """Introspection result with where it came from."""

    url: str
    fetched_at: str
    hash: str
    schema_json: dict


def _profile(source: str, schema_json: dict) -> SchemaProfile:
    return SchemaProfile(
        url=source,
        fetched_at=utils.now_iso(),
        hash=utils.sha256(schema_json),
        schema_json=schema_json,
    )


def load_schema(
    url: Optional[str] = None,
    schema_file: Optional[str] = None,
    cfg: Optional[Config] = None,
    allow_cache: bool = True,
    refresh: bool = False,
    token: Optional[str] = None,
) -> SchemaProfile:
    """
    Load an introspection result to render.

    A file wins over a URL. Fetched results are cached per host and reused
    unless `refresh` is set or caching is disabled.

    Raises:
        ValueError: If neither url nor schema_file provided
    """
    if schema_file:
        return _profile(f"file://{schema_file}", utils.read_json(schema_file))

    if not url:
        raise ValueError("No URL or schema file provided")

    cfg = cfg or Config()
    cache_path = cache_path_for(url, cfg)

    if allow_cache and not refresh and Path(cache_path).exists():
        logger.debug("Using cached schema %s", cache_path)
        return SchemaProfile(**utils.read_json(cache_path))

    prof = _profile(url, introspect(url, token or cfg.token, cfg))
    utils.write_json(cache_path, asdict(prof))
    logger.debug("Cached schema %s at %s", prof.hash, cache_path)
    return prof


def introspect(graphql_url: str, token: Optional[str] = None, cfg: Optional[Config] = None) -> dict:
    """
    Run the standard introspection query against an endpoint.

    Args:
        graphql_url: GraphQL endpoint URL
        token: Optional bearer token
        cfg: Configuration (extra headers, timeout)

    Returns:
        The `data` member of the response, i.e. {"__schema": {...}}

    Raises:
        RuntimeError: On non-200 status, non-JSON body or GraphQL errors
    """
    cfg = cfg or Config()
    headers = {**cfg.headers, **({"Authorization": f"Bearer {token}"} if token else {})}

    logger.debug("POST introspection query to %s", graphql_url)
    resp = requests.post(
        graphql_url, json={"query": utils.INTROSPECTION_QUERY}, headers=headers, timeout=cfg.timeout
    )
    if resp.status_code != 200:
        raise RuntimeError(f"Introspection failed with status {resp.status_code}")

    payload = utils.safe_json_response(resp)
    if payload.get("errors"):
        raise RuntimeError(f"Introspection errors: {payload['errors']}")
    return payload["data"]


def cache_path_for(url: str, cfg: Config) -> str:
    """Cache file for an endpoint, keyed by host."""
    return str(Path(cfg.schema_cache_dir) / f"{utils.sanitize_host(url)}.json")
