import dataclasses as dt
import typing as tp

from typing import Any, Generic, Hashable, Iterator, Optional, Union

from . import err

K = tp.TypeVar("K", bound=Hashable)
T = tp.TypeVar("T")


@dt.dataclass(frozen=True)
class Boolean:
    value: bool

    @staticmethod
    def kind() -> str:
        return "bool"


@dt.dataclass(frozen=True)
class Text:
    value: str

    @staticmethod
    def kind() -> str:
        return "str"


Value = Union[Boolean, Text]


def _typeName(typ: type) -> str:
    return getattr(typ, "__name__", str(typ))


def convert(key: Any, val: Value, typ: type[T]) -> T:
    """
    Converts a stored value to the requested type.

    Booleans are only returned for `bool`, text is returned as is for `str`
    and passed to `typ` for anything else (e.g. `int`, `float` or `Path`).
    """
    if typ is bool:
        if not isinstance(val, Boolean):
            raise err.TypeMismatch(key, Boolean.kind(), val.kind())
        return tp.cast(T, val.value)

    if not isinstance(val, Text):
        raise err.TypeMismatch(key, _typeName(typ), val.kind())

    if typ is str:
        return tp.cast(T, val.value)

    try:
        return tp.cast(Any, typ)(val.value)
    except (ValueError, TypeError) as e:
        raise err.InvalidValue(key, typ, val.value) from e


class ResultStore(Generic[K]):
    """
    Maps option keys to the values matched while parsing.

    Every occurrence is kept in order, the last one is the current value.
    """

    _values: dict[K, list[Value]]

    def __init__(self):
        self._values = {}

    def put(self, key: K, value: Value) -> None:
        self._values.setdefault(key, []).append(value)

    def get(self, key: K) -> Optional[Value]:
        values = self._values.get(key)
        if not values:
            return None
        return values[-1]

    def values(self, key: K) -> list[Value]:
        return list(self._values.get(key, []))

    def pop(self, key: K) -> Optional[Value]:
        """Removes and returns the last occurrence of `key`."""
        values = self._values.get(key)
        if not values:
            return None
        val = values.pop()
        if not values:
            del self._values[key]
        return val

    def has(self, key: K) -> bool:
        return key in self._values

    def keys(self) -> Iterator[K]:
        return iter(self._values.keys())

    def __len__(self) -> int:
        return len(self._values)
