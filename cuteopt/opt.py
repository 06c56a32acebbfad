from enum import Enum
import dataclasses as dt
import logging
import typing as tp

from typing import Generic, Hashable, Iterator, Optional

from . import const

_logger = logging.getLogger(__name__)

K = tp.TypeVar("K", bound=Hashable)


class Kind(Enum):
    """
    Enum representing the kind of an option.
    """

    SWITCH = 0
    VALUE = 1


@dt.dataclass(frozen=True)
class Match:
    """
    Result of matching a token against an option.

    Attributes:
        okay: True if the token names the option.
        inline: The text after the separator, or None if the token had none.
    """

    okay: bool
    inline: Optional[str] = None


NO_MATCH = Match(False)


def splitToken(token: str) -> tuple[str, Optional[str]]:
    """Splits a token into its name and inline value at the first separator."""
    name, sep, inline = token.partition(const.SEPARATOR)
    if not sep:
        return token, None
    return name, inline


@dt.dataclass(frozen=True)
class OptKeeper(Generic[K]):
    """
    Describes one recognized option.

    Attributes:
        spelling: The literal token that invokes the option (e.g. "--verbose").
        kind: Whether the option is a switch or takes a value.
        key: The caller-defined key the parsed result is stored under.
    """

    spelling: str
    kind: Kind
    key: K

    def __post_init__(self):
        try:
            hash(self.key)
        except TypeError as e:
            raise TypeError(f"Option key {self.key!r} is not hashable") from e

    def consumes(self) -> bool:
        """Returns True if the option expects a value."""
        return self.kind == Kind.VALUE

    def match(self, token: str) -> Match:
        """Matches a single token against this option."""
        name, inline = splitToken(token)
        if name != self.spelling:
            return NO_MATCH
        return Match(True, inline)


def switch(spelling: str, key: K) -> OptKeeper[K]:
    """
    Creates a boolean flag that does not consume a value.

    Args:
        spelling: The option spelling, conventionally prefixed with "--".
        key: The key the result is stored under.
    """
    return OptKeeper(spelling, Kind.SWITCH, key)


def option(spelling: str, key: K) -> OptKeeper[K]:
    """
    Creates an option that takes a value, either as "--name=value" or as
    the following token.

    Args:
        spelling: The option spelling, conventionally prefixed with "--".
        key: The key the result is stored under.
    """
    return OptKeeper(spelling, Kind.VALUE, key)


class Registry(Generic[K]):
    """
    An ordered collection of options indexed by spelling.
    """

    _keepers: dict[str, OptKeeper[K]]

    def __init__(self):
        self._keepers = {}

    def register(self, keeper: OptKeeper[K]) -> None:
        """Adds an option, replacing any option with the same spelling."""
        if keeper.spelling in self._keepers:
            _logger.debug(f"Overriding option '{keeper.spelling}'")
        self._keepers[keeper.spelling] = keeper

    def find(self, spelling: str) -> Optional[OptKeeper[K]]:
        """Looks up an option by its exact spelling."""
        return self._keepers.get(spelling)

    def lookup(self, key: K) -> Optional[OptKeeper[K]]:
        """Returns the most recently registered option carrying `key`."""
        for keeper in reversed(self._keepers.values()):
            if keeper.key == key:
                return keeper
        return None

    def has(self, key: K) -> bool:
        return self.lookup(key) is not None

    def __contains__(self, spelling: object) -> bool:
        return spelling in self._keepers

    def __iter__(self) -> Iterator[OptKeeper[K]]:
        return iter(self._keepers.values())

    def __len__(self) -> int:
        return len(self._keepers)
