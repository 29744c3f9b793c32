import logging

import typer
import typer_di

from .commands import format_, parse, validate
from .version import version_callback


app = typer_di.TyperDI(help="Parse, validate and format ARNs (arn:partition:service:region:account-id:resource).")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging.",
    ),
):
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )


app.command("parse")(parse)
app.command("validate")(validate)
app.command("format")(format_)


if __name__ == "__main__":
    app()
