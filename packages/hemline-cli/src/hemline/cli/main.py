import logging

import typer

from hemline.common import bus
from .rendering import CliRenderer

from .commands.report import report_command

app = typer.Typer(
    name="hemline",
    help="Sort, render and summarize lint violations collected by analysis workers.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show debug output and log messages."
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    bus.set_renderer(CliRenderer(verbose=verbose))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="report", help="Print violations from one or more dumps.")(
    report_command
)


if __name__ == "__main__":
    app()
