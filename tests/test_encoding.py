"""Tests for the jata text encoding."""

import math
import pytest

from jata import TypeTag, encode, decode, split_lines
from jata.encoding import INT_MAX, INT_MIN


class TestTypeTag:
    """Tests for TypeTag helpers."""

    def test_scalar_and_list_forms(self):
        """List tags know their element tag; scalars map to themselves."""
        assert TypeTag.INT.is_list is False
        assert TypeTag.INT_LIST.is_list is True
        assert TypeTag.INT_LIST.scalar is TypeTag.INT
        assert TypeTag.INT.scalar is TypeTag.INT

    def test_python_types(self):
        """python_type is the type of a value or list element."""
        assert TypeTag.STR.python_type is str
        assert TypeTag.FLOAT_LIST.python_type is float
        assert TypeTag.BOOL_LIST.python_type is bool


class TestEncode:
    """Tests for encode()."""

    def test_scalars(self):
        """Each scalar tag has its own text form."""
        assert encode(TypeTag.STR, "hello world") == "hello world"
        assert encode(TypeTag.INT, -42) == "-42"
        assert encode(TypeTag.FLOAT, 2.5) == "2.5"
        assert encode(TypeTag.BOOL, True) == "1"
        assert encode(TypeTag.BOOL, False) == "0"

    def test_str_is_unmodified(self):
        """Strings are stored byte for byte, newlines included."""
        assert encode(TypeTag.STR, "line 1\nline 2\n") == "line 1\nline 2\n"

    def test_lists(self):
        """List elements are joined with newlines."""
        assert encode(TypeTag.INT_LIST, [1, -2, 300]) == "1\n-2\n300"
        assert encode(TypeTag.BOOL_LIST, [True, False, True]) == "1\n0\n1"
        assert encode(TypeTag.STR_LIST, ["a", "", "c"]) == "a\n\nc"
        assert encode(TypeTag.FLOAT_LIST, (0.5, -1.0)) == "0.5\n-1.0"

    def test_empty_lists(self):
        """An empty list of any type is empty text."""
        for tag in (TypeTag.STR_LIST, TypeTag.INT_LIST, TypeTag.FLOAT_LIST, TypeTag.BOOL_LIST):
            assert encode(tag, []) == ""

    def test_int_accepted_as_float(self):
        """Integers are widened for float tags."""
        assert encode(TypeTag.FLOAT, 3) == "3.0"

    def test_wrong_python_type(self):
        """Values of the wrong Python type raise TypeError."""
        with pytest.raises(TypeError):
            encode(TypeTag.INT, "5")
        with pytest.raises(TypeError):
            encode(TypeTag.INT, True)  # bool is not an int here
        with pytest.raises(TypeError):
            encode(TypeTag.BOOL, 1)
        with pytest.raises(TypeError):
            encode(TypeTag.STR_LIST, "abc")
        with pytest.raises(TypeError):
            encode(TypeTag.INT_LIST, [1, 2.0])

    def test_wrong_type_message_names_expected_type(self):
        """The TypeError names the expected and actual Python types."""
        with pytest.raises(TypeError, match="Expected int, got str"):
            encode(TypeTag.INT, "5")
        with pytest.raises(TypeError, match="Expected bool, got int"):
            encode(TypeTag.BOOL_LIST, [1])

    def test_int_range(self):
        """Integers must fit in signed 64 bits."""
        assert encode(TypeTag.INT, INT_MAX) == str(INT_MAX)
        with pytest.raises(ValueError):
            encode(TypeTag.INT, INT_MAX + 1)
        with pytest.raises(ValueError):
            encode(TypeTag.INT, INT_MIN - 1)

    def test_str_list_element_with_newline_rejected(self):
        """An element containing a newline cannot be stored."""
        with pytest.raises(ValueError):
            encode(TypeTag.STR_LIST, ["a\nb"])

    def test_str_list_trailing_empty_rejected(self):
        """A trailing empty element would be dropped on read."""
        with pytest.raises(ValueError):
            encode(TypeTag.STR_LIST, ["a", ""])
        with pytest.raises(ValueError):
            encode(TypeTag.STR_LIST, [""])


class TestSplitLines:
    """Tests for split_lines()."""

    def test_empty(self):
        """Empty text has no elements."""
        assert split_lines("") == []

    def test_trailing_newline(self):
        """One trailing newline does not add an element."""
        assert split_lines("1\n2\n") == ["1", "2"]
        assert split_lines("1\n2") == ["1", "2"]

    def test_single_newline(self):
        """A lone newline is one empty element."""
        assert split_lines("\n") == [""]

    def test_consecutive_newlines(self):
        """Consecutive newlines give empty elements."""
        assert split_lines("a\n\nb") == ["a", "", "b"]
        assert split_lines("a\n\n") == ["a", ""]

    def test_carriage_return_kept(self):
        """Only \\n separates elements; \\r stays in the token."""
        assert split_lines("a\r\nb\r\n") == ["a\r", "b\r"]


class TestDecode:
    """Tests for decode()."""

    def test_scalars(self):
        """Valid scalar text parses to the matching Python value."""
        assert decode(TypeTag.STR, " spaced ") == " spaced "
        assert decode(TypeTag.INT, "-42") == -42
        assert decode(TypeTag.INT, "+7") == 7
        assert decode(TypeTag.FLOAT, "1e3") == 1000.0
        assert decode(TypeTag.FLOAT, "-.5") == -0.5
        assert decode(TypeTag.BOOL, "1") is True
        assert decode(TypeTag.BOOL, "0") is False

    def test_float_specials(self):
        """Infinities and NaN are accepted."""
        assert decode(TypeTag.FLOAT, "inf") == math.inf
        assert decode(TypeTag.FLOAT, "-inf") == -math.inf
        assert math.isnan(decode(TypeTag.FLOAT, "NaN"))

    @pytest.mark.parametrize(
        "tag,text",
        [
            (TypeTag.INT, ""),
            (TypeTag.INT, "12a"),
            (TypeTag.INT, " 12"),
            (TypeTag.INT, "1_000"),
            (TypeTag.INT, "1.0"),
            (TypeTag.INT, "1\r"),
            (TypeTag.INT, str(INT_MAX + 1)),
            (TypeTag.FLOAT, "abc"),
            (TypeTag.FLOAT, "1.0\n"),
            (TypeTag.FLOAT, "1e"),
            (TypeTag.BOOL, "2"),
            (TypeTag.BOOL, "true"),
            (TypeTag.BOOL, ""),
        ],
    )
    def test_invalid_scalars(self, tag, text):
        """Text outside the scalar grammar raises ValueError."""
        with pytest.raises(ValueError):
            decode(tag, text)

    def test_lists(self):
        """List text parses element by element."""
        assert decode(TypeTag.INT_LIST, "1\n-2\n300") == [1, -2, 300]
        assert decode(TypeTag.BOOL_LIST, "1\n0\n") == [True, False]
        assert decode(TypeTag.STR_LIST, "a\n\nb") == ["a", "", "b"]

    def test_empty_text_is_empty_list(self):
        """Empty text decodes to an empty list for every list tag."""
        for tag in (TypeTag.STR_LIST, TypeTag.INT_LIST, TypeTag.FLOAT_LIST, TypeTag.BOOL_LIST):
            assert decode(tag, "") == []

    def test_empty_element_in_numeric_list(self):
        """Consecutive newlines are only valid in string lists."""
        with pytest.raises(ValueError):
            decode(TypeTag.INT_LIST, "1\n\n2")
        with pytest.raises(ValueError):
            decode(TypeTag.FLOAT_LIST, "1.0\n\n2.0")
        with pytest.raises(ValueError):
            decode(TypeTag.BOOL_LIST, "1\n\n0")

    def test_bad_element_names_line(self):
        """The error points at the first bad line."""
        with pytest.raises(ValueError, match="line 2"):
            decode(TypeTag.INT_LIST, "1\nx\n3")

    def test_float_text_roundtrip(self):
        """Floats decode to exactly the value that was encoded."""
        for value in (0.1, 1e-300, 1.7976931348623157e308, -0.0, 123456789.125):
            assert decode(TypeTag.FLOAT, encode(TypeTag.FLOAT, value)) == value
