# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from streakboard.terminal import configuration
from streakboard.terminal.auth import login, logout, whoami
from streakboard.terminal.custom_typer import OrderedAliasedTyperGroup
from streakboard.terminal.streak import add, day, show
from streakboard.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Streakboard - Log what you did today, see your year at a glance",
    no_args_is_help=True,
)
app.command(name="login, li", no_args_is_help=True)(login)
app.command(name="logout, lo")(logout)
app.command(name="whoami, w")(whoami)
app.command(name="add, a", no_args_is_help=True)(add)
app.command(name="show, s")(show)
app.command(name="day, d")(day)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
) -> None:
    """
    Streakboard - Log what you did today, see your year at a glance

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
