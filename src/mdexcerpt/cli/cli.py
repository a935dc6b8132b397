"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdexcerpt.cli.commands import build_cmd, show_cmd


app = typer.Typer(name="mdexcerpt", no_args_is_help=True, help="Blog post excerpt extraction")

app.command(name="build")(build_cmd)
app.command(name="show")(show_cmd)
