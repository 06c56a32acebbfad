import sys


RED = "\033[31m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
RESET = "\033[0m"


def error(msg: str) -> None:
    print(f"{RED}Error:{RESET} {msg}\n", file=sys.stderr)
