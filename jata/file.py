"""Single-file storage for caller-defined value types.

GenericFile is the lighter alternative to TypedProperty: the caller brings
a type that can turn itself into text and back, and the file stores only
that text. No type information is written, so reading a path with a
different value type than the one that wrote it is the caller's problem.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Generic, Optional, Type, TypeVar

from .encoding import DEFAULT_ENCODING
from .property import PathLike

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="FileValue")


class FileValue(ABC):
    """Text codec contract for values stored with GenericFile.

    Example:
        @dataclass
        class Version(FileValue):
            major: int
            minor: int

            @classmethod
            def decode(cls, text):
                major, sep, minor = text.partition(".")
                if not sep or not (major.isdigit() and minor.isdigit()):
                    return None
                return cls(int(major), int(minor))

            def encode(self):
                return f"{self.major}.{self.minor}"
    """

    @classmethod
    @abstractmethod
    def decode(cls, text: str):
        """Build a value from its text form.

        Returns:
            The value, or None if text is not a valid representation
        """
        pass

    @abstractmethod
    def encode(self) -> str:
        """Return the text form of the value."""
        pass


class FileState(Enum):
    """Whether a GenericFile handle holds a cached value yet."""

    UNSET = "unset"
    CACHED = "cached"


class GenericFile(Generic[T]):
    """A file path paired with the last value known to be in it.

    The cached value only changes through reset_value() and set_value();
    it goes stale if the file is modified elsewhere. Failures are reported
    as None or False without detail, so an I/O error and malformed text
    look the same to the caller (the cause is logged at DEBUG level).

    set_value() writes first and caches only after the write succeeds, so
    after a failed write the handle still holds its previous value.

    Example:
        handle = GenericFile.new(Version, "app/VERSION")
        handle.set_value(Version(1, 4))     # True
        handle.check_value()                # Version(major=1, minor=4)
    """

    def __init__(
        self,
        value_type: Type[T],
        path: PathLike,
        encoding: str = DEFAULT_ENCODING,
    ):
        self.value_type = value_type
        self.path = Path(path)
        self.encoding = encoding
        self._value: Optional[T] = None
        self._state = FileState.UNSET

    @classmethod
    def new(cls, value_type: Type[T], path: PathLike, **kwargs) -> "GenericFile[T]":
        """Create a handle with no cached value. Nothing is read or written."""
        return cls(value_type, path, **kwargs)

    @property
    def state(self) -> FileState:
        return self._state

    @property
    def is_set(self) -> bool:
        return self._state is FileState.CACHED

    @property
    def value(self) -> Optional[T]:
        """Cached value, or None while the handle is unset."""
        return self._value

    def __repr__(self) -> str:
        return (
            f"GenericFile({self.value_type.__name__}, path='{self.path}', "
            f"state={self._state.name})"
        )

    def _read(self) -> Optional[T]:
        try:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", self.path, e)
            return None

        value = self.value_type.decode(text)
        if value is None:
            logger.debug(
                "Contents of %s are not a valid %s", self.path, self.value_type.__name__
            )
        return value

    def check_value(self) -> Optional[T]:
        """Read and decode the file without touching the cached value.

        Returns:
            The decoded value, or None on a read or decode failure
        """
        return self._read()

    def reset_value(self) -> bool:
        """Reload the cached value from the file.

        Returns:
            True if the file was read and decoded, False otherwise. On
            failure the cached value is left as it was.
        """
        value = self._read()
        if value is None:
            return False
        self._value = value
        self._state = FileState.CACHED
        return True

    def set_value(self, value: T) -> bool:
        """Write a value to the file and cache it.

        Returns:
            True if the write succeeded. On failure the cache keeps its
            previous value and state, and a value that cannot be encoded
            leaves the file untouched.
        """
        try:
            data = value.encode().encode(self.encoding)
        except UnicodeEncodeError as e:
            logger.debug("Cannot encode %s for %s: %s", self.value_type.__name__, self.path, e)
            return False
        try:
            with open(self.path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.debug("Cannot write %s: %s", self.path, e)
            return False

        self._value = value
        self._state = FileState.CACHED
        logger.debug("Wrote %s to %s", self.value_type.__name__, self.path)
        return True
