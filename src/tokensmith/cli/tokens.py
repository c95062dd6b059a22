"""
Inspection CLI commands.

- tokens: list loaded tokens with their type and layer
- color: convert a color literal
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tokensmith.cli.utils import configure_logging, resolve_project
from tokensmith.core.color import color_to_hex, parse_color
from tokensmith.core.config import load_config
from tokensmith.core.errors import ConfigError, TokenSourceError
from tokensmith.core.layers import classify
from tokensmith.core.loader import load_tokens

console = Console()

_LAYER_CHOICES = {"primitive", "semantic", "component", "unclassified"}


def tokens_command(
    project: str | None = typer.Option(
        None, "--project", "-p", help="Token project directory (default: current)"
    ),
    layer: str | None = typer.Option(
        None, "--layer", "-l", help="Filter by layer (primitive, semantic, component, unclassified)"
    ),
    token_type: str | None = typer.Option(None, "--type", "-t", help="Filter by token type"),
) -> None:
    """List tokens with their type, layer and resolved value."""
    configure_logging()
    if layer and layer not in _LAYER_CHOICES:
        console.print(f"[red]Unknown layer: {escape(layer)}[/red]")
        raise typer.Exit(code=1)

    project_root = resolve_project(project)
    try:
        dictionary = load_tokens(project_root, load_config(project_root).source)
    except (TokenSourceError, ConfigError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Tokens")
    table.add_column("Path", style="cyan")
    table.add_column("Type")
    table.add_column("Layer")
    table.add_column("Value")

    shown = 0
    for token in dictionary:
        token_layer = classify(token.path)
        layer_name = token_layer.value if token_layer else "unclassified"
        if layer and layer_name != layer:
            continue
        if token_type and token.type_name != token_type:
            continue
        value = token.resolved_value
        rendered = value if isinstance(value, str) else json.dumps(value)
        if token_layer is None:
            layer_name = f"[dim]{layer_name}[/dim]"
        table.add_row(escape(token.name), token.type_name, layer_name, escape(rendered))
        shown += 1

    console.print(table)
    console.print(f"{shown} of {len(dictionary)} tokens")


def color_command(
    value: str = typer.Argument(..., help="Color literal, e.g. 'oklch(0.6 0.15 250)'"),
) -> None:
    """Convert a color literal to sRGB channels and hex."""
    color = parse_color(value)
    if color is None:
        console.print(f"[red]Not a supported color: {escape(value)}[/red]")
        raise typer.Exit(code=1)
    typer.echo(f"rgb:   {color.r} {color.g} {color.b}")
    typer.echo(f"alpha: {color.a:g}")
    typer.echo(f"hex:   {color_to_hex(value)}")
