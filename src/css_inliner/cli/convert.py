"""CLI command: css-inliner convert -- inline the CSS of an HTML file."""

from __future__ import annotations

import logging
import sys

import click

from css_inliner.config import InlinerConfig
from css_inliner.errors import InlinerError
from css_inliner.inliner import CssToInlineStyles
from css_inliner.sources import load_stylesheet


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--css",
    "stylesheets",
    multiple=True,
    help="Extra stylesheet (file path or http(s) URL). May be repeated.",
)
@click.option(
    "-o", "--output", type=click.File("w", encoding="utf-8"), default="-",
    help="Where to write the result (default: stdout).",
)
@click.option("--pretty/--no-pretty", default=False, help="Pretty-print the output.")
@click.option(
    "--remove-style-tags", is_flag=True, default=False,
    help="Drop <style> elements after inlining them.",
)
@click.option("--timeout", default=10.0, type=float, help="HTTP timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def convert(
    source,
    stylesheets: tuple[str, ...],
    output,
    pretty: bool,
    remove_style_tags: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """Inline the CSS of an HTML document.

    SOURCE is an HTML file, or - for stdin.  Rules from the document's own
    <style> elements are applied first, then every --css stylesheet in the
    order given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = InlinerConfig(
        pretty_print=pretty,
        remove_style_tags=remove_style_tags,
        http_timeout=timeout,
    )

    try:
        css = [load_stylesheet(s, timeout=config.http_timeout) for s in stylesheets]
        html = CssToInlineStyles(config).convert(source.read(), css)
    except InlinerError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    output.write(html)
    output.write("\n")
