import os
import sys
from dataclasses import dataclass, field

import config
from ZeroShell.builtin import execute_builtin
from ZeroShell.history import add_to_history
from ZeroShell.parser import tokenize
from ZeroShell.term import (
    BOLD_CYAN, BOLD_RED, BOLD_YELLOW, YELLOW, colorize, print_error,
)


@dataclass
class Session:
    """State owned by the main loop and handed to built-in commands."""
    current_directory: str
    previous_directory: str
    home_directory: str
    history: list = field(default_factory=list)
    last_status: int = 0

    @classmethod
    def create(cls):
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = "/"

        home = os.path.expanduser("~")
        if home == "~":
            print_error("Impossible to get your home dir!")
            home = cwd

        return cls(current_directory=cwd, previous_directory=cwd, home_directory=home)


def prompt(session):
    """Generate shell prompt"""
    cwd = session.current_directory
    home = session.home_directory
    prefix = home if home.endswith(os.sep) else home + os.sep
    if cwd == home or cwd.startswith(prefix):
        rest = os.path.relpath(cwd, home)
        address = colorize("~", BOLD_RED) + colorize("/" + ("" if rest == "." else rest), BOLD_CYAN)
    else:
        address = colorize(cwd, BOLD_CYAN)

    return (colorize(config.PROMPT_SYMBOL, BOLD_YELLOW) + address
            + colorize(config.PROMPT_SUFFIX, YELLOW))


def read_entry(session, reader=input):
    """
    Read one logical command, asking for more lines while a quote or a
    trailing backslash is left open.

    Returns: (entry: raw text, command, unterminated: bool)
    Raises SystemExit with the last status at end of input.
    """
    try:
        entry = reader(prompt(session)) + "\n"
    except EOFError:
        print()
        sys.exit(session.last_status)

    command, unterminated = tokenize(entry)
    while unterminated:
        try:
            line = reader(colorize(config.CONTINUATION_PROMPT, YELLOW))
        except EOFError:
            break
        entry += line + "\n"
        # quote and escape state depend on the whole buffer
        command, unterminated = tokenize(entry)

    return entry, command, unterminated


def main_loop(session=None, reader=input):
    """Main shell loop"""
    if session is None:
        session = Session.create()

    while True:
        try:
            entry, command, unterminated = read_entry(session, reader)
        except KeyboardInterrupt:
            print()
            continue

        if unterminated:
            print_error("Syntax error: Unterminated quoted string")
            add_to_history(session.history, entry)
            continue

        if not command.name:
            continue

        session.last_status = execute_builtin(command.name, command.args, session)
        add_to_history(session.history, entry)
