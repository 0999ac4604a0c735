import typer
from hemline.common.messaging import protocols
from hemline.spec import Severity

LEVEL_COLORS = {
    Severity.ERROR.value: typer.colors.RED,
    Severity.WARNING.value: typer.colors.YELLOW,
    "success": typer.colors.GREEN,
    "debug": typer.colors.BRIGHT_BLACK,
}


class CliRenderer(protocols.Renderer):
    """
    Prints bus messages to stdout. Violation lines arrive at their severity's
    level, so errors and warnings are colored by severity.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def render(self, message: str, level: str):
        if level == "debug" and not self.verbose:
            return
        typer.secho(message, fg=LEVEL_COLORS.get(level))
