import os
import re
import sys

from ZeroShell.fileops import builtin_cp, builtin_mv, builtin_rm, resolve_path
from ZeroShell.history import show_history
from ZeroShell.listing import builtin_ls
from ZeroShell.term import BOLD_BLUE, clear_screen, colorize, print_error

# exit takes a 32-bit signed status
EXIT_CODE = re.compile(r"[+-]?[0-9]+")
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


def builtin_echo(args, session):
    print(" ".join(args))
    return 0


def builtin_pwd(args, session):
    print(colorize(session.current_directory, BOLD_BLUE))
    return 0


def builtin_cd(args, session):
    """
    Change directory: cd [dir], cd - (previous directory), cd ~/dir
    Returns: exit_code
    """
    path = args[0] if args else session.home_directory
    if path == "-":
        path = session.previous_directory
    elif path.startswith("~"):
        path = session.home_directory + path[1:]

    if path:
        try:
            os.chdir(resolve_path(session, path))
        except OSError as e:
            print_error(f"cd: {path}: {e.strerror or e}")
            return 1

    session.previous_directory = session.current_directory
    try:
        session.current_directory = os.getcwd()
    except OSError as e:
        print_error(f"cd: {e.strerror or e}")
        return 1
    return 0


def builtin_history(args, session):
    """Show command history"""
    show_history(session.history)
    return 0


def builtin_cat(args, session):
    """
    Print files, or copy stdin to stdout when no file is given.
    Returns: exit_code
    """
    if not args:
        for line in sys.stdin:
            print(line, end="")
        return 0

    contents = []
    for arg in args:
        try:
            with open(resolve_path(session, arg), encoding="utf-8", errors="replace") as f:
                contents.append(f.read())
        except OSError as e:
            print_error(f"cat: {arg}: {e.strerror or e}")
            return 1
    print("".join(contents), end="")
    return 0


def builtin_mkdir(args, session):
    """Tạo thư mục"""
    if not args:
        print_error("mkdir: missing operand")
        return 1

    for arg in args:
        try:
            os.mkdir(resolve_path(session, arg))
        except OSError as e:
            print_error(f"mkdir: cannot create directory '{arg}': {e.strerror or e}")
    return 0


def builtin_exit(args, session):
    """
    exit [n]: leave the shell with n, or with the last status.
    Returns 2 (without exiting) when n is not a number.
    """
    if not args:
        sys.exit(session.last_status)

    if EXIT_CODE.fullmatch(args[0]):
        code = int(args[0])
        if INT32_MIN <= code <= INT32_MAX:
            sys.exit(code)

    print_error(f"exit: Illegal number: {args[0]}")
    return 2


def builtin_clear(args, session):
    clear_screen()
    return 0


BUILTINS = {
    "echo": builtin_echo,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
    "mv": builtin_mv,
    "cp": builtin_cp,
    "ls": builtin_ls,
    "cat": builtin_cat,
    "rm": builtin_rm,
    "mkdir": builtin_mkdir,
    "history": builtin_history,
    "exit": builtin_exit,
    "clear": builtin_clear,
}


def execute_builtin(name, args, session):
    """
    Run the built-in command called name.
    Returns: exit_code (127 if there is no such command)
    """
    handler = BUILTINS.get(name)
    if handler is None:
        print_error(f"Command <{name}> not found")
        return 127

    try:
        return handler(args, session)
    except OSError as e:
        print_error(f"{name}: {e.strerror or e}")
        return 1
    except ValueError as e:
        # e.g. a path argument with an embedded null byte
        print_error(f"{name}: {e}")
        return 1
