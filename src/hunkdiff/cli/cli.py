"""CLI entrypoint: Typer app definition and command registration"""

import typer

from hunkdiff.cli.commands import diff_cmd, extract_cmd, files_cmd, main_callback


app = typer.Typer(name="hunkdiff", no_args_is_help=True, help="Line-level diffs and unified-diff reconstruction")

app.callback()(main_callback)
app.command(name="diff")(diff_cmd)
app.command(name="extract")(extract_cmd)
app.command(name="files")(files_cmd)
