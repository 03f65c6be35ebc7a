"""Exceptions for the jata package."""

from pathlib import Path

from .types import TypeTag


class PropertyError(Exception):
    """Base exception for all property errors."""

    pass


class PropertyIOError(PropertyError, OSError):
    """Reading or writing the backing file failed."""

    def __init__(self, location: Path, cause: Exception):
        self.location = location
        self.cause = cause
        super().__init__(f"I/O error at {location}: {cause}")


class TypeMismatchError(PropertyError, TypeError):
    """A getter asked for a different type than the property was created with."""

    def __init__(self, location: Path, expected: TypeTag, actual: TypeTag):
        self.location = location
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Property at {location} is {actual.value}, not {expected.value}"
        )


class ParseError(PropertyError, ValueError):
    """File contents do not match the grammar of the property's type."""

    def __init__(self, location: Path, tag: TypeTag, cause: Exception):
        self.location = location
        self.tag = tag
        self.cause = cause
        super().__init__(f"Cannot parse {tag.value} at {location}: {cause}")
