import sys
from config import MAX_HISTORY

try:
    import readline
except ImportError:
    import pyreadline3 as readline


def init_readline():
    """Cấu hình readline để hoạt động giống terminal Linux"""
    try:
        if not sys.stdin.isatty():
            return

        # Phím mũi tên lên/xuống
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")

        # Ctrl+Left/Right để nhảy giữa các từ
        readline.parse_and_bind("\\e[1;5D: backward-word")
        readline.parse_and_bind("\\e[1;5C: forward-word")

        # Emacs key bindings
        readline.parse_and_bind("set editing-mode emacs")

        readline.set_history_length(MAX_HISTORY)
        # input() adds every physical line on its own; entries are added whole
        readline.set_auto_history(False)

    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)


def add_to_history(history, entry):
    """
    Record a raw entry in the session history.
    Returns: True if the entry was recorded (it has a non-whitespace character)
    """
    if not entry.strip():
        return False
    history.append(entry)
    try:
        # readline recalls one line at a time
        readline.add_history(entry.rstrip("\n"))
    except Exception as e:
        print(f"Warning: Could not update readline history: {e}", file=sys.stderr)
    return True


def show_history(history):
    """In ra toàn bộ history"""
    width = len(str(len(history)))
    for i, entry in enumerate(history, start=1):
        # entries keep their own trailing newline
        print(f"{i:>{width}}  {entry}", end="" if entry.endswith("\n") else "\n")
