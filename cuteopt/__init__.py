import logging
import sys
from enum import Enum
from typing import Optional

from . import const, vt100
from .cute import Cute
from .err import (
    Error,
    InvalidValue,
    KeyNotFound,
    MalformedSwitch,
    MissingValue,
    ParseError,
    QueryError,
    TypeMismatch,
    UnrecognizedOption,
)
from .opt import Kind, Match, OptKeeper, Registry, option, switch
from .val import Boolean, ResultStore, Text, Value

__all__ = [
    "Boolean",
    "Cute",
    "Error",
    "InvalidValue",
    "KeyNotFound",
    "Kind",
    "MalformedSwitch",
    "Match",
    "MissingValue",
    "OptKeeper",
    "ParseError",
    "QueryError",
    "Registry",
    "ResultStore",
    "Text",
    "TypeMismatch",
    "UnrecognizedOption",
    "Value",
    "main",
    "option",
    "switch",
]


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


class MainOpt(Enum):
    VERBOSE = "verbose"
    VERSION = "version"
    ECHO = "echo"


def main(argv: Optional[list[str]] = None) -> int:
    cute: Cute[MainOpt] = Cute()
    cute.addSwitch("--verbose", MainOpt.VERBOSE)
    cute.addSwitch("--version", MainOpt.VERSION)
    cute.addOption("--echo", MainOpt.ECHO)

    try:
        cute.parse(sys.argv[1:] if argv is None else argv)
        logger.setup(cute.matched(MainOpt.VERBOSE))

        if cute.matched(MainOpt.VERSION):
            print(f"cuteopt v{const.VERSION_STR}")

        if cute.matched(MainOpt.ECHO):
            print(cute.value(MainOpt.ECHO, str))

        return 0

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        print(f"Usage: {const.ARGV0} [--verbose] [--version] [--echo VALUE]")
        return 1

    except KeyboardInterrupt:
        print()
        return 1
