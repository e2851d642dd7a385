import pytest

from clparam.parser import ValueKind
from clparam.parser.signature import infer_value_kind


def no_args():
    pass


def untyped(value):
    pass


def typed_int(value: int):
    pass


def typed_bool(value: bool):
    pass


def string_annotation(value: "float"):
    pass


def unsupported(value: list):
    pass


def none_annotation(value: None):
    pass


def with_optional(value: int, extra: str = "x"):
    pass


def only_optional(value: int = 3):
    pass


def var_args(*args, **kwargs):
    pass


def keyword_only(*, value: int):
    pass


@pytest.mark.parametrize(
    "func, expected",
    [
        (no_args, ValueKind.NONE),
        (untyped, ValueKind.STR),
        (typed_int, ValueKind.INT),
        (typed_bool, ValueKind.BOOL),
        (string_annotation, ValueKind.FLOAT),
        (unsupported, ValueKind.STR),
        (none_annotation, ValueKind.STR),
        (with_optional, ValueKind.INT),
        (only_optional, ValueKind.NONE),
        (var_args, ValueKind.NONE),
        (keyword_only, ValueKind.NONE),
        (lambda: None, ValueKind.NONE),
        (lambda value: None, ValueKind.STR),
    ],
)
def test_infer_value_kind(func, expected):
    assert infer_value_kind(func) is expected


def test_infer_value_kind_bound_method():
    class Settings:
        def set_port(self, port: int):
            pass

    assert infer_value_kind(Settings().set_port) is ValueKind.INT


def test_infer_value_kind_too_many_arguments():
    def two(first, second):
        pass

    with pytest.raises(ValueError, match="at most one argument"):
        infer_value_kind(two)
