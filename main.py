import sys

import config
from ZeroShell.history import init_readline
from ZeroShell.shell import Session, main_loop
from ZeroShell.signals import init_signal_handlers
from ZeroShell.term import BOLD_RED, colorize


def main():
    if config.SHOW_BANNER:
        print(colorize(config.BANNER, BOLD_RED))

    init_signal_handlers()
    init_readline()

    session = Session.create()
    try:
        main_loop(session)
    finally:
        sys.stdout.flush()


if __name__ == "__main__":
    main()
