from typing import Any


class Error(RuntimeError):
    """Base class for every error raised by cuteopt."""

    pass


# --- Parse errors ----------------------------------------------------------- #


class ParseError(Error):
    spelling: str

    def __init__(self, message: str, spelling: str):
        super().__init__(message)
        self.spelling = spelling


class UnrecognizedOption(ParseError):
    def __init__(self, spelling: str):
        super().__init__(f"Unrecognized option '{spelling}'", spelling)


class MalformedSwitch(ParseError):
    def __init__(self, spelling: str):
        super().__init__(f"Switch '{spelling}' does not take a value", spelling)


class MissingValue(ParseError):
    def __init__(self, spelling: str):
        super().__init__(f"Expected value for option '{spelling}'", spelling)


# --- Query errors ----------------------------------------------------------- #


class QueryError(Error):
    key: Any

    def __init__(self, message: str, key: Any):
        super().__init__(message)
        self.key = key


class KeyNotFound(QueryError):
    def __init__(self, key: Any):
        super().__init__(f"No value for {key!r}", key)


class TypeMismatch(QueryError):
    expected: str
    actual: str

    def __init__(self, key: Any, expected: str, actual: str):
        super().__init__(
            f"Value for {key!r} is {actual}, but {expected} was requested", key
        )
        self.expected = expected
        self.actual = actual


class InvalidValue(QueryError):
    """The stored text could not be converted to the requested type."""

    expected: type
    raw: str

    def __init__(self, key: Any, expected: type, raw: str):
        super().__init__(
            f"Can not convert value '{raw}' of {key!r} to {expected.__name__}", key
        )
        self.expected = expected
        self.raw = raw
