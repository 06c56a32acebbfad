import logging
import sys
import typing as tp

from typing import Generic, Iterable, Optional

from . import err
from .opt import K, OptKeeper, Registry, option, splitToken, switch
from .val import Boolean, ResultStore, Text, Value, convert

_logger = logging.getLogger(__name__)

T = tp.TypeVar("T")

_END = object()


class Cute(Generic[K]):
    """
    Holds the registered options and the values parsed for them.

    Example:
        cute = Cute()
        cute.add(switch("--boolean", Key.BOOLEAN))
        cute.add(option("--string", Key.STRING))
        cute.parse(["--boolean", "--string=32"])
        cute.value(Key.STRING, str)  # "32"
    """

    _registry: Registry[K]
    _results: ResultStore[K]

    def __init__(self):
        self._registry = Registry()
        self._results = ResultStore()

    @property
    def registry(self) -> Registry[K]:
        return self._registry

    @property
    def results(self) -> ResultStore[K]:
        return self._results

    # --- Registration ------------------------------------------------------- #

    def add(self, keeper: OptKeeper[K]) -> "Cute[K]":
        """Registers an option, a later option with the same spelling wins."""
        self._registry.register(keeper)
        return self

    def addSwitch(self, spelling: str, key: K) -> "Cute[K]":
        return self.add(switch(spelling, key))

    def addOption(self, spelling: str, key: K) -> "Cute[K]":
        return self.add(option(spelling, key))

    def get(self, key: K) -> Optional[OptKeeper[K]]:
        """Returns the option registered for `key`, if any."""
        return self._registry.lookup(key)

    # --- Parsing ------------------------------------------------------------ #

    def parse(self, tokens: Iterable[tp.Any]) -> None:
        """
        Parses a sequence of arguments against the registered options.

        Values matched before a failing token stay recorded.

        Raises:
            UnrecognizedOption: A token names no registered option.
            MalformedSwitch: A switch was given an inline value.
            MissingValue: An option was last and had no inline value.
        """
        it = iter(tokens)
        for raw in it:
            token = str(raw)
            name, _ = splitToken(token)

            keeper = self._registry.find(name)
            if keeper is None:
                raise err.UnrecognizedOption(name)
            inline = keeper.match(token).inline

            value: Value
            if not keeper.consumes():
                if inline is not None:
                    raise err.MalformedSwitch(name)
                value = Boolean(True)
            elif inline is not None:
                value = Text(inline)
            else:
                nxt = next(it, _END)
                if nxt is _END:
                    raise err.MissingValue(name)
                value = Text(str(nxt))

            _logger.debug(f"Matched '{name}' as {keeper.key!r}: {value}")
            self._results.put(keeper.key, value)

    def parseArgv(self) -> None:
        """Parses the arguments of the current process, without the program name."""
        self.parse(sys.argv[1:])

    # --- Queries ------------------------------------------------------------ #

    def has(self, key: K) -> bool:
        """Checks if an option with `key` is registered."""
        return self._registry.has(key)

    def matched(self, key: K) -> bool:
        """Checks if an option with `key` was matched while parsing."""
        return self._results.has(key)

    def rawValue(self, key: K) -> Value:
        val = self._results.get(key)
        if val is None:
            raise err.KeyNotFound(key)
        return val

    def rawValues(self, key: K) -> list[Value]:
        """Returns every value recorded for `key`, in command-line order."""
        values = self._results.values(key)
        if not values:
            raise err.KeyNotFound(key)
        return values

    def popRawValue(self, key: K) -> Value:
        """Removes and returns the last value recorded for `key`."""
        val = self._results.pop(key)
        if val is None:
            raise err.KeyNotFound(key)
        return val

    def value(self, key: K, typ: type[T]) -> T:
        """
        Returns the value parsed for `key` as `typ`.

        Raises:
            KeyNotFound: No option with `key` was matched.
            TypeMismatch: The stored value is of another kind.
            InvalidValue: The text could not be converted to `typ`.
        """
        return convert(key, self.rawValue(key), typ)
