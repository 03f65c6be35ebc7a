"""Type tags for typed properties."""

from enum import Enum


class TypeTag(Enum):
    """Declared type of a property.

    The set is closed: four scalar kinds and a list form of each. A tag is
    fixed when a property is created and every getter checks against it.

    Example:
        TypeTag.INT.is_list            # False
        TypeTag.INT_LIST.scalar        # TypeTag.INT
        TypeTag.INT_LIST.python_type   # int
    """

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    STR_LIST = "str_list"
    INT_LIST = "int_list"
    FLOAT_LIST = "float_list"
    BOOL_LIST = "bool_list"

    @property
    def is_list(self) -> bool:
        """Whether values of this tag are lists."""
        return self in _SCALAR_OF

    @property
    def scalar(self) -> "TypeTag":
        """Element tag for list tags, the tag itself for scalars."""
        return _SCALAR_OF.get(self, self)

    @property
    def python_type(self) -> type:
        """Python type of a value (or list element) of this tag."""
        return _PYTHON_TYPES[self.scalar]


_SCALAR_OF = {
    TypeTag.STR_LIST: TypeTag.STR,
    TypeTag.INT_LIST: TypeTag.INT,
    TypeTag.FLOAT_LIST: TypeTag.FLOAT,
    TypeTag.BOOL_LIST: TypeTag.BOOL,
}

_PYTHON_TYPES = {
    TypeTag.STR: str,
    TypeTag.INT: int,
    TypeTag.FLOAT: float,
    TypeTag.BOOL: bool,
}
