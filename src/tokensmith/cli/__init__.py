"""
tokensmith CLI Package.

- build.py: build and init commands
- tokens.py: token listing and color conversion
- utils.py: Shared utilities
"""

import typer

from tokensmith.cli.build import build_command, init_command
from tokensmith.cli.tokens import color_command, tokens_command
from tokensmith.cli.utils import version_callback

app = typer.Typer(
    help="tokensmith - compile design tokens into CSS, JS, TypeScript, Swift, Kotlin and JSON",
    no_args_is_help=True,
)


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """tokensmith command line."""


app.command(name="build")(build_command)
app.command(name="init")(init_command)
app.command(name="tokens")(tokens_command)
app.command(name="color")(color_command)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


__all__ = ["app", "main"]
