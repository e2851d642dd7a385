import math

import pytest

from clparam.parser import ValueKind
from clparam.parser.utils import coerce_bool, coerce_value, normalize_default


# --- Tests ---
@pytest.mark.parametrize(
    "value, kind, expected",
    [
        ("42", ValueKind.INT, 42),
        ("-42", ValueKind.INT, -42),
        ("+7", ValueKind.INT8, 7),
        ("127", ValueKind.INT8, 127),
        ("-128", ValueKind.INT8, -128),
        ("65535", ValueKind.UINT16, 65535),
        ("18446744073709551615", ValueKind.UINT64, 2**64 - 1),
        ("3.14", ValueKind.FLOAT, 3.14),
        ("10", ValueKind.FLOAT, 10.0),
        ("1e3", ValueKind.FLOAT, 1000.0),
        ("True", ValueKind.BOOL, True),
        ("off", ValueKind.BOOL, False),
        ("hello", ValueKind.STR, "hello"),
        ("", ValueKind.STR, ""),
    ],
)
def test_coerce_value_basic(value, kind, expected):
    assert coerce_value(value, kind) == expected


def test_coerce_value_infinity():
    assert math.isinf(coerce_value("inf", ValueKind.FLOAT))


@pytest.mark.parametrize(
    "value, kind",
    [
        ("abc", ValueKind.INT),
        ("1.5", ValueKind.INT),
        (" 5", ValueKind.INT),
        ("1_000", ValueKind.INT),
        ("", ValueKind.INT),
        ("128", ValueKind.INT8),
        ("-1", ValueKind.UINT8),
        ("256", ValueKind.UINT8),
        ("4294967296", ValueKind.UINT32),
        ("nan", ValueKind.FLOAT),
        ("1_000.5", ValueKind.FLOAT),
        ("three", ValueKind.FLOAT),
        ("maybe", ValueKind.BOOL),
        ("x", ValueKind.NONE),
    ],
)
def test_coerce_value_failure(value, kind):
    with pytest.raises(ValueError):
        coerce_value(value, kind)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("yes", True),
        (" Y ", True),
        ("1", True),
        ("t", True),
        ("NO", False),
        ("0", False),
        ("f", False),
    ],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


def test_coerce_bool_error_message():
    with pytest.raises(ValueError) as excinfo:
        coerce_bool("sometimes")
    assert "'sometimes' is not a boolean" in str(excinfo.value)


def test_coerce_value_range_message():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("300", ValueKind.UINT8)
    assert "out of range for uint8 (0..255)" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, kind, expected",
    [
        (5, ValueKind.INT, 5),
        (255, ValueKind.UINT8, 255),
        (True, ValueKind.BOOL, True),
        (1.5, ValueKind.FLOAT, 1.5),
        ("/etc/app.conf", ValueKind.STR, "/etc/app.conf"),
        ("", ValueKind.STR, ""),
    ],
)
def test_normalize_default(value, kind, expected):
    assert normalize_default(value, kind) == expected


def test_normalize_default_int_for_float_is_stored_as_float():
    result = normalize_default(2, ValueKind.FLOAT)
    assert result == 2.0
    assert isinstance(result, float)


@pytest.mark.parametrize(
    "value, kind",
    [
        ("5", ValueKind.INT),
        (True, ValueKind.INT),
        (1.0, ValueKind.INT),
        (1, ValueKind.BOOL),
        ("true", ValueKind.BOOL),
        (False, ValueKind.FLOAT),
        ("1.5", ValueKind.FLOAT),
        (5, ValueKind.STR),
        ("x", ValueKind.NONE),
    ],
)
def test_normalize_default_type_error(value, kind):
    with pytest.raises(TypeError):
        normalize_default(value, kind)


@pytest.mark.parametrize(
    "value, kind",
    [
        (300, ValueKind.UINT8),
        (-1, ValueKind.UINT32),
        ("two words", ValueKind.STR),
        ("tab\there", ValueKind.STR),
    ],
)
def test_normalize_default_value_error(value, kind):
    with pytest.raises(ValueError):
        normalize_default(value, kind)
