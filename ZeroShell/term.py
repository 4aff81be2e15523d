import sys

import config

RESET = "\x1b[0m"
RED = "\x1b[31m"
BOLD_RED = "\x1b[1;31m"
BOLD_GREEN = "\x1b[1;32m"
YELLOW = "\x1b[33m"
BOLD_YELLOW = "\x1b[1;33m"
BOLD_BLUE = "\x1b[1;34m"
BOLD_CYAN = "\x1b[1;36m"

CLEAR_SCREEN = "\x1bc"


def colorize(text, color):
    """Wrap text in an ANSI color unless colors are disabled."""
    if not config.USE_COLOR or not color:
        return text
    return f"{color}{text}{RESET}"


def print_error(message):
    """In lỗi màu đỏ ra stderr"""
    print(colorize(f" {message}", RED), file=sys.stderr)


def clear_screen():
    sys.stdout.write(CLEAR_SCREEN)
    sys.stdout.flush()
