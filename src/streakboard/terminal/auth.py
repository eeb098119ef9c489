# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from streakboard.errors import StoreError
from streakboard.service.auth import AuthValidationError
from streakboard.terminal.session import load_auth, require_session
from streakboard.time import datetime_to_display_local_datetime_str


def login(
    email: Annotated[str, typer.Argument(help="Email address to sign in with")],
) -> None:
    """Sign in. Tasks are stored per email address."""
    auth = load_auth()
    try:
        session = auth.sign_in(email)
    except AuthValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    except StoreError as e:
        typer.echo(f"Could not store session: {e}")
        raise typer.Exit(1)

    Console().print(f"Signed in as [plum1]{escape(session['email'])}[/plum1]")


def logout() -> None:
    """Sign out of the current session."""
    auth = load_auth()
    if auth.session is None:
        typer.echo("Not signed in.")
        return
    email = auth.session["email"]
    try:
        auth.sign_out()
    except StoreError as e:
        typer.echo(f"Could not remove session: {e}")
        raise typer.Exit(1)
    Console().print(f"Signed out [plum1]{escape(email)}[/plum1]")


def whoami() -> None:
    """Show the signed-in user."""
    auth = load_auth()
    session = require_session(auth)
    signed_in = datetime_to_display_local_datetime_str(session["signed_in"])
    Console().print(
        f"[plum1]{escape(session['email'])}[/plum1] "
        f"[bright_black]since {signed_in}[/bright_black]"
    )
