"""Typed properties backed by plain-text files."""

import logging
from pathlib import Path
from typing import Any, List, Union

from . import encoding as codec
from .encoding import DEFAULT_ENCODING
from .exceptions import ParseError, PropertyIOError, TypeMismatchError
from .types import TypeTag

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TypedProperty:
    """A named value of a fixed type, stored in its own text file.

    The file is the only state. The handle remembers where the file is and
    which type it holds, but never caches the value: every getter reads the
    file again, so changes made outside this process show up on the next
    read.

    Example:
        from jata import TypedProperty

        sizes = TypedProperty.new_int_list("sizes", "data/sizes", [1, -2, 300])
        sizes.get_int_list()   # [1, -2, 300]
        sizes.get_str()        # raises TypeMismatchError

    Getters check the requested type before parsing, so asking for the
    wrong type raises TypeMismatchError while corrupt contents raise
    ParseError. A missing or unreadable file raises PropertyIOError.
    """

    def __init__(
        self,
        name: str,
        location: PathLike,
        tag: TypeTag,
        encoding: str = DEFAULT_ENCODING,
    ):
        """Bind a handle to a file without touching the disk.

        Use the new_* constructors to create a property, or open() to bind
        to a file that already exists.

        Args:
            name: Display name, not used to derive the path
            location: Path of the backing file
            tag: Declared type of the stored value
            encoding: Text encoding of the file
        """
        self.name = name
        self._location = Path(location)
        self._tag = tag
        self.encoding = encoding

    @property
    def location(self) -> Path:
        """Path of the backing file."""
        return self._location

    @property
    def tag(self) -> TypeTag:
        """Declared type, fixed for the lifetime of the handle."""
        return self._tag

    def __repr__(self) -> str:
        return (
            f"TypedProperty(name={self.name!r}, location='{self._location}', "
            f"tag={self._tag.name})"
        )

    # Construction

    @classmethod
    def create(
        cls,
        name: str,
        location: PathLike,
        value: Any,
        tag: TypeTag,
        encoding: str = DEFAULT_ENCODING,
    ) -> "TypedProperty":
        """Create a property by writing its initial value.

        The file is created, or truncated if it exists, and replaced with
        the encoded value.

        Args:
            name: Display name
            location: Path of the backing file
            value: Initial value, a list for list tags
            tag: Declared type of the value
            encoding: Text encoding of the file

        Returns:
            Handle bound to the file and tag

        Raises:
            TypeError: If value does not match tag
            ValueError: If value cannot be represented as text in the
                file encoding (UnicodeEncodeError included)
            PropertyIOError: If the file cannot be written
        """
        data = codec.encode(tag, value).encode(encoding)
        prop = cls(name, location, tag, encoding=encoding)
        prop._write_bytes(data)
        return prop

    @classmethod
    def open(
        cls,
        name: str,
        location: PathLike,
        tag: TypeTag,
        encoding: str = DEFAULT_ENCODING,
    ) -> "TypedProperty":
        """Bind to an existing property file without writing it.

        Nothing is checked here; a missing file or bad contents surface on
        the first getter call.
        """
        return cls(name, location, tag, encoding=encoding)

    @classmethod
    def new_str(cls, name: str, location: PathLike, value: str, **kwargs) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.STR, **kwargs)

    @classmethod
    def new_int(cls, name: str, location: PathLike, value: int, **kwargs) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.INT, **kwargs)

    @classmethod
    def new_float(cls, name: str, location: PathLike, value: float, **kwargs) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.FLOAT, **kwargs)

    @classmethod
    def new_bool(cls, name: str, location: PathLike, value: bool, **kwargs) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.BOOL, **kwargs)

    @classmethod
    def new_str_list(
        cls, name: str, location: PathLike, value: List[str], **kwargs
    ) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.STR_LIST, **kwargs)

    @classmethod
    def new_int_list(
        cls, name: str, location: PathLike, value: List[int], **kwargs
    ) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.INT_LIST, **kwargs)

    @classmethod
    def new_float_list(
        cls, name: str, location: PathLike, value: List[float], **kwargs
    ) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.FLOAT_LIST, **kwargs)

    @classmethod
    def new_bool_list(
        cls, name: str, location: PathLike, value: List[bool], **kwargs
    ) -> "TypedProperty":
        return cls.create(name, location, value, TypeTag.BOOL_LIST, **kwargs)

    # File access

    def _write_bytes(self, data: bytes) -> None:
        try:
            with open(self._location, "wb") as f:
                f.write(data)
        except OSError as e:
            raise PropertyIOError(self._location, e) from e
        logger.debug("Wrote %s property %r to %s", self._tag.value, self.name, self._location)

    def read_text(self) -> str:
        """Read the raw file contents.

        Raises:
            PropertyIOError: If the file is missing or unreadable
        """
        try:
            with open(self._location, "r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PropertyIOError(self._location, e) from e
        logger.debug("Read property %r from %s", self.name, self._location)
        return text

    # Getters

    def _get(self, requested: TypeTag) -> Any:
        text = self.read_text()
        if requested is not self._tag:
            raise TypeMismatchError(self._location, requested, self._tag)
        try:
            return codec.decode(self._tag, text)
        except ValueError as e:
            raise ParseError(self._location, self._tag, e) from e

    def get(self) -> Any:
        """Read the value using the property's own type.

        Raises:
            PropertyIOError: If the file cannot be read
            ParseError: If the contents do not parse
        """
        return self._get(self._tag)

    def get_str(self) -> str:
        return self._get(TypeTag.STR)

    def get_int(self) -> int:
        return self._get(TypeTag.INT)

    def get_float(self) -> float:
        return self._get(TypeTag.FLOAT)

    def get_bool(self) -> bool:
        return self._get(TypeTag.BOOL)

    def get_str_list(self) -> List[str]:
        return self._get(TypeTag.STR_LIST)

    def get_int_list(self) -> List[int]:
        return self._get(TypeTag.INT_LIST)

    def get_float_list(self) -> List[float]:
        return self._get(TypeTag.FLOAT_LIST)

    def get_bool_list(self) -> List[bool]:
        return self._get(TypeTag.BOOL_LIST)
