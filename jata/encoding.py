"""Text encoding for typed property values.

Every TypeTag maps to a plain-text representation with no header and no
embedded type information:

    STR         raw text
    INT         decimal integer ("-42")
    FLOAT       shortest round-tripping decimal ("0.1", "1e+16", "inf")
    BOOL        "0" or "1"
    *_LIST      element encodings joined by newlines, "" for an empty list

Decoding is strict. Tokens that do not match the scalar grammar raise
ValueError naming the token; surrounding whitespace is not tolerated.
"""

import re
from typing import Any, Callable, Dict, List, Tuple

from .types import TypeTag

DEFAULT_ENCODING = "utf-8"
LIST_SEPARATOR = "\n"

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


# Scalar encoders


def _wrong_type(tag: TypeTag, value: Any) -> TypeError:
    return TypeError(
        f"Expected {tag.python_type.__name__}, got {type(value).__name__}"
    )


def _encode_str(value: Any) -> str:
    if not isinstance(value, str):
        raise _wrong_type(TypeTag.STR, value)
    return value


def _encode_int(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(TypeTag.INT, value)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"Integer {value} does not fit in 64 bits")
    return str(value)


def _encode_float(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _wrong_type(TypeTag.FLOAT, value)
    try:
        return repr(float(value))
    except OverflowError as e:
        raise ValueError(f"Value {value} is out of float range") from e


def _encode_bool(value: Any) -> str:
    if not isinstance(value, bool):
        raise _wrong_type(TypeTag.BOOL, value)
    return "1" if value else "0"


# Scalar decoders


def _decode_str(text: str) -> str:
    return text


def _decode_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer {text!r} does not fit in 64 bits")
    return value


def _decode_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(f"invalid float {text!r}")
    return float(text)


def _decode_bool(text: str) -> bool:
    if text == "1":
        return True
    if text == "0":
        return False
    raise ValueError(f"invalid bool {text!r}, expected '0' or '1'")


_SCALAR_CODECS: Dict[TypeTag, Tuple[Callable[[Any], str], Callable[[str], Any]]] = {
    TypeTag.STR: (_encode_str, _decode_str),
    TypeTag.INT: (_encode_int, _decode_int),
    TypeTag.FLOAT: (_encode_float, _decode_float),
    TypeTag.BOOL: (_encode_bool, _decode_bool),
}


def split_lines(text: str) -> List[str]:
    """Split list text into element tokens.

    A single trailing separator ends the last element instead of starting
    a new one, so "1\\n2\\n" and "1\\n2" both give ["1", "2"]. Empty text
    is an empty list. Consecutive separators give empty tokens.

    Args:
        text: Encoded list text

    Returns:
        Element tokens in file order
    """
    if not text:
        return []
    tokens = text.split(LIST_SEPARATOR)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def _check_str_list(values: List[str]) -> None:
    """Reject string lists whose text form would not decode to the same list."""
    for index, item in enumerate(values):
        if LIST_SEPARATOR in item:
            raise ValueError(
                f"Element {index} contains a line separator and cannot be stored"
            )
    if values and values[-1] == "":
        raise ValueError("Last element is empty and would be lost on read")


def encode(tag: TypeTag, value: Any) -> str:
    """Encode a value as the text stored for the given tag.

    Args:
        tag: Declared type of the value
        value: Python value; a list or tuple for list tags

    Returns:
        Text to write to the property file

    Raises:
        TypeError: If the value (or an element) has the wrong Python type
        ValueError: If the value cannot be represented in the text format
    """
    encode_scalar = _SCALAR_CODECS[tag.scalar][0]

    if not tag.is_list:
        return encode_scalar(value)

    if not isinstance(value, (list, tuple)):
        raise TypeError(f"Expected list for {tag.value}, got {type(value).__name__}")
    parts = [encode_scalar(item) for item in value]
    if tag is TypeTag.STR_LIST:
        _check_str_list(parts)
    return LIST_SEPARATOR.join(parts)


def decode(tag: TypeTag, text: str) -> Any:
    """Decode stored text into a value of the given tag.

    List text is decoded element by element; the first bad element aborts
    the whole decode.

    Args:
        tag: Declared type of the stored value
        text: Full file contents

    Returns:
        The decoded value (a list for list tags)

    Raises:
        ValueError: If any token does not match the scalar grammar
    """
    decode_scalar = _SCALAR_CODECS[tag.scalar][1]

    if not tag.is_list:
        return decode_scalar(text)

    values = []
    for line, token in enumerate(split_lines(text), start=1):
        try:
            values.append(decode_scalar(token))
        except ValueError as e:
            raise ValueError(f"line {line}: {e}") from e
    return values

