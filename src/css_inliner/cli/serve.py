"""CLI command: css-inliner serve -- run the HTTP conversion service."""

from __future__ import annotations

import click

from css_inliner.config import InlinerConfig


@click.command()
@click.option("--host", default=InlinerConfig.host, help="Host to bind to")
@click.option("--port", default=InlinerConfig.port, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, debug: bool) -> None:
    """Start the css-inliner web service."""
    from css_inliner.web.app import create_app

    config = InlinerConfig(host=host, port=port)
    app = create_app(config)
    click.echo(f"Starting css-inliner on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=debug)
