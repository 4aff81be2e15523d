from dataclasses import dataclass, field
from enum import Enum


class State(Enum):
    NORMAL = "normal"
    DOUBLE_QUOTE = "double_quote"
    SINGLE_QUOTE = "single_quote"


# Characters a backslash still escapes inside double quotes
DOUBLE_QUOTE_ESCAPABLE = '"\\`$'


@dataclass
class Command:
    """A parsed command: first word is the name, the rest are arguments."""
    name: str = ""
    args: list = field(default_factory=list)

    def add_word(self, word):
        """Add a word, ignoring empty ones."""
        if not word:
            return
        self.add_quoted_word(word)

    def add_quoted_word(self, word):
        """Add a word even if empty (a closed quote like "" is a real argument)."""
        if not self.name:
            self.name = word
        else:
            self.args.append(word)


def tokenize(raw):
    """
    Split raw input (possibly several physical lines) into a Command.

    Honors single quotes, double quotes and backslash escapes. A backslash at
    the end of a physical line joins it with the next one; a quote left open
    across lines keeps the newline inside the word.

    Returns: (command: Command, unterminated: bool)
      unterminated is True when the input ends inside a quote or right after
      an unescaped backslash, i.e. more input is needed.
    """
    command = Command()
    word = []
    state = State.NORMAL
    escaped = False

    def close_quote(line, pos):
        # "abc" followed by whitespace ends the word right away and eats the
        # separator; otherwise the word stays open ("ab"cd -> abcd)
        nonlocal word
        if pos < len(line) and line[pos].isspace():
            command.add_quoted_word("".join(word))
            word = []
            return pos + 1
        return pos

    lines = raw.split("\n")
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if state is not State.NORMAL and not escaped:
            word.append("\n")
        if escaped and index != last:
            # backslash-newline: line continuation, nothing is emitted
            escaped = False

        pos = 0
        while pos < len(line):
            ch = line[pos]
            pos += 1

            if state is State.NORMAL:
                if escaped:
                    word.append(ch)
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch.isspace():
                    command.add_word("".join(word))
                    word = []
                elif ch == '"':
                    state = State.DOUBLE_QUOTE
                elif ch == "'":
                    state = State.SINGLE_QUOTE
                else:
                    word.append(ch)

            elif state is State.DOUBLE_QUOTE:
                if escaped:
                    if ch not in DOUBLE_QUOTE_ESCAPABLE:
                        word.append("\\")
                    word.append(ch)
                    escaped = False
                elif ch == '"':
                    state = State.NORMAL
                    pos = close_quote(line, pos)
                elif ch == "\\":
                    escaped = True
                else:
                    word.append(ch)

            else:
                # single quotes: everything is literal until the closing quote
                if ch == "'":
                    state = State.NORMAL
                    pos = close_quote(line, pos)
                else:
                    word.append(ch)

    command.add_word("".join(word))

    unterminated = state is not State.NORMAL or escaped
    return command, unterminated
