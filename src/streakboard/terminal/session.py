# SPDX-License-Identifier: MIT

import typer

from streakboard.errors import StoreError
from streakboard.model.session import Session
from streakboard.repository.configuration import CONFIGURATION_REPO
from streakboard.repository.session import SESSION_REPO
from streakboard.repository.task import TASK_REPO
from streakboard.service.auth import AuthContext
from streakboard.service.board import StreakBoard


def load_auth() -> AuthContext:
    auth = AuthContext(SESSION_REPO)
    try:
        auth.init()
    except StoreError as e:
        typer.echo(f"Could not read session: {e}")
        raise typer.Exit(1)
    return auth


def require_session(auth: AuthContext) -> Session:
    session = auth.session
    if session is None:
        typer.echo("Not signed in. Run 'streakboard login EMAIL' first.")
        raise typer.Exit(1)
    return session


def mount_board(auth: AuthContext) -> StreakBoard:
    """Create the board for the signed-in user and load their year."""
    session = require_session(auth)
    config = CONFIGURATION_REPO.get_config()
    board = StreakBoard(
        session,
        TASK_REPO,
        auth=auth,
        regenerate_on_rollover=config["regenerate_on_rollover"],
    )
    board.mount()
    return board
