import os

# Banner printed once at startup
SHOW_BANNER = os.getenv("ZEROSHELL_BANNER", "1") not in ("0", "false", "no")

# https://no-color.org
USE_COLOR = "NO_COLOR" not in os.environ

MAX_HISTORY = 1000

PROMPT_SYMBOL = "➜  "
PROMPT_SUFFIX = " $ "
CONTINUATION_PROMPT = "> "

BANNER = r"""
     ██████╗     ███████╗██╗  ██╗███████╗██╗     ██╗
    ██╔═████╗    ██╔════╝██║  ██║██╔════╝██║     ██║
    ██║██╔██║    ███████╗███████║█████╗  ██║     ██║
    ████╔╝██║    ╚════██║██╔══██║██╔══╝  ██║     ██║
    ╚██████╔╝    ███████║██║  ██║███████╗███████╗███████╗
     ╚═════╝     ╚══════╝╚═╝  ╚═╝╚══════╝╚══════╝╚══════╝
"""
