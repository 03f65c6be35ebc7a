"""
jata - typed values persisted as plain-text files.

Each value lives in its own file and the file is the source of truth:
nothing is cached, so every read reflects the current contents on disk.

Quick Start:
    from jata import TypedProperty, PropertyGroup

    # Create properties (writes the files)
    retries = TypedProperty.new_int("retries", "conf/retries", 3)
    hosts = TypedProperty.new_str_list("hosts", "conf/hosts", ["a", "b"])

    # Read them back (re-reads the files)
    retries.get_int()        # 3
    hosts.get_str_list()     # ["a", "b"]

    # Asking for the wrong type is a distinct error
    retries.get_str()        # raises TypeMismatchError

    # Group related properties
    conf = PropertyGroup("conf/", [retries, hosts])

Key Classes:
    - TypedProperty: a type-tagged value stored in one text file
    - PropertyGroup: ordered container of properties
    - GenericFile: one file holding a caller-defined FileValue type
    - TypeTag: declared type of a property

Exceptions:
    - PropertyIOError: the file could not be read or written
    - TypeMismatchError: a getter asked for the wrong type
    - ParseError: the file contents do not match the declared type
"""

from .types import TypeTag
from .encoding import DEFAULT_ENCODING, decode, encode, split_lines
from .property import TypedProperty
from .group import PropertyGroup
from .file import FileState, FileValue, GenericFile
from .exceptions import (
    PropertyError,
    PropertyIOError,
    TypeMismatchError,
    ParseError,
)

__all__ = [
    # Properties
    "TypedProperty",
    "PropertyGroup",
    "TypeTag",
    # Generic files
    "GenericFile",
    "FileValue",
    "FileState",
    # Encoding
    "encode",
    "decode",
    "split_lines",
    "DEFAULT_ENCODING",
    # Exceptions
    "PropertyError",
    "PropertyIOError",
    "TypeMismatchError",
    "ParseError",
]

__version__ = "0.1.0"
