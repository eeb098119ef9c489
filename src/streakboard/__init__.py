# SPDX-License-Identifier: MIT

from streakboard.cleanup import register_cleanup
from streakboard.initialize import initialize
from streakboard.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
