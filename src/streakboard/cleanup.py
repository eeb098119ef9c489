# SPDX-License-Identifier: MIT

import atexit

from streakboard.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    # Tasks and sessions are written as they change; only config is buffered
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
