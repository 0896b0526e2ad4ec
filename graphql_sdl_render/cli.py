"""CLI for gql-sdl."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import config, schema_loader, utils
from .render import from_introspection
from .report import error, print_kv

app = typer.Typer(help="Render GraphQL introspection results as SDL")
schema_app = typer.Typer(help="Schema operations")
config_app = typer.Typer(help="Configuration")
app.add_typer(schema_app, name="schema")
app.add_typer(config_app, name="config")

logger = logging.getLogger("graphql_sdl_render")


def _setup_logging(verbose: bool) -> None:
    if verbose and not logger.handlers:
        logger.setLevel(logging.DEBUG)
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
        logger.propagate = False


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Render GraphQL introspection results as SDL."""
    _setup_logging(verbose)


def _resolve_endpoint(cfg: config.Config, url: Optional[str], profile: Optional[str], token: Optional[str]):
    """Pick URL and token from CLI options, then profile, then config defaults."""
    if profile:
        prof = cfg.profile(profile)
        return url or prof.get("url"), token or prof.get("token") or cfg.token
    return url or cfg.default_url, token or cfg.token


@app.command("render")
def render_cmd(
    schema_file: Optional[str] = typer.Argument(None, help="Introspection JSON file"),
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    profile: Optional[str] = typer.Option(None, help="Endpoint profile from config"),
    token: Optional[str] = typer.Option(None, help="Bearer token"),
    out: Optional[str] = typer.Option(None, help="Output SDL file path"),
    refresh: bool = typer.Option(False, help="Ignore cached introspection result"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Config file path"),
):
    """Render SDL from an introspection file or a live endpoint."""
    try:
        cfg = config.load(config_file)
        endpoint, auth = _resolve_endpoint(cfg, url, profile, token)

        if not schema_file and not endpoint:
            error("No schema source. Pass a file, --url, --profile or set default_url in config.")
            raise typer.Exit(1)

        prof = schema_loader.load_schema(
            url=endpoint, schema_file=schema_file, cfg=cfg, allow_cache=True, refresh=refresh, token=auth
        )
        sdl = from_introspection(prof.schema_json)

        if out:
            utils.write_text(out, sdl)
            print_kv("SDL written", {"source": prof.url, "hash": prof.hash, "path": out})
        else:
            typer.echo(sdl, nl=False)

    except typer.Exit:
        raise
    except Exception as e:
        error(str(e))
        raise typer.Exit(1)


@schema_app.command("pull")
def schema_pull(
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    profile: Optional[str] = typer.Option(None, help="Endpoint profile from config"),
    token: Optional[str] = typer.Option(None, help="Bearer token"),
    out: Optional[str] = typer.Option(None, help="Output file path"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Config file path"),
):
    """Fetch and cache the introspection result."""
    try:
        cfg = config.load(config_file)
        endpoint, auth = _resolve_endpoint(cfg, url, profile, token)

        if not endpoint:
            error("No URL provided. Use --url, --profile or set default_url in config.")
            raise typer.Exit(1)

        prof = schema_loader.load_schema(url=endpoint, cfg=cfg, allow_cache=True, refresh=True, token=auth)

        # If custom output path specified, write just the introspection JSON
        if out:
            utils.write_json(out, prof.schema_json)
            path = out
        else:
            path = schema_loader.cache_path_for(prof.url, cfg)

        print_kv("Schema pulled", {"url": prof.url, "hash": prof.hash, "path": path})
    except typer.Exit:
        raise
    except Exception as e:
        error(str(e))
        raise typer.Exit(1)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Where to write the config file"),
):
    """Write an example config file."""
    written = config.create_example_config(path)
    print_kv("Config written", {"path": written})


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
