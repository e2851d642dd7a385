import logging

import pytest

from clparam.exceptions import ParseError, TypeMismatchError
from clparam.parser import (
    NameValueExtractor,
    ParameterParser,
    ParsedToken,
    ParserState,
    ValueKind,
)
from clparam.parser.dispatcher import Dispatcher


@pytest.fixture
def calls():
    return []


@pytest.fixture
def parser(calls):
    parser = ParameterParser()

    def record(name):
        return lambda *args: calls.append((name, *args))

    parser.add_parameter("-x", callback=record("-x"), value_kind=int).default_value(1)
    parser.add_parameter("-a", "--all", callback=record("-a"), value_kind=None)
    parser.add_parameter("-b", callback=record("-b"), value_kind=str)
    parser.add_parameter("-y", callback=record("-y"), value_kind=float).default_value(2)
    return parser


def test_tokens_in_input_order_then_defaults(parser, calls):
    result = parser.parse(["-b=hi", "--all"])
    assert calls == [("-b", "hi"), ("-a",), ("-x", 1), ("-y", 2.0)]
    assert result == {"-b": "hi", "-a": None, "-x": 1, "-y": 2.0}


def test_supplied_value_replaces_default(parser, calls):
    parser.parse(["-y=0.5", "-x=7"])
    assert calls == [("-y", 0.5), ("-x", 7)]


def test_parse_without_tokens_dispatches_defaults(parser, calls):
    assert parser.parse([]) == {"-x": 1, "-y": 2.0}
    assert calls == [("-x", 1), ("-y", 2.0)]


def test_type_mismatch_dispatches_nothing(parser, calls):
    with pytest.raises(TypeMismatchError) as excinfo:
        parser.parse(["-a", "-b=ok", "-x=abc"])
    error = excinfo.value
    assert error.parameter == "-x"
    assert error.kind is ValueKind.INT
    assert error.text == "abc"
    assert isinstance(error.__cause__, ValueError)
    assert str(error) == "Parameter '-x' expects a int value, got 'abc'"
    assert calls == []
    assert parser.state is ParserState.FAILED


@pytest.mark.parametrize(
    "value_kind, text",
    [
        ("uint8", "300"),
        ("int8", "-129"),
        ("uint16", "-1"),
        (bool, "maybe"),
        (float, "nan"),
    ],
)
def test_type_mismatch_kinds(value_kind, text):
    parser = ParameterParser()
    parser.add_parameter("-n", callback=lambda value: None, value_kind=value_kind)
    with pytest.raises(TypeMismatchError):
        parser.parse([f"-n={text}"])


@pytest.mark.parametrize(
    "value_kind, text, expected",
    [
        (bool, "yes", True),
        (bool, "0", False),
        ("uint16", "8080", 8080),
        ("int64", "-9223372036854775808", -(2**63)),
        (float, "-1.5e2", -150.0),
        (str, "with spaces", "with spaces"),
    ],
)
def test_value_conversion(value_kind, text, expected):
    received = []
    parser = ParameterParser()
    parser.add_parameter("-n", callback=received.append, value_kind=value_kind)
    parser.parse([f"-n={text}"])
    assert received == [expected]


def test_repeated_parse_is_idempotent(parser, calls):
    first = parser.parse(["-b=hi", "-x=3"])
    first_calls = list(calls)
    calls.clear()
    second = parser.parse(["-b=hi", "-x=3"])
    assert first == second
    assert calls == first_calls
    assert parser.state is ParserState.SUCCEEDED


def test_parse_after_failure(parser, calls):
    with pytest.raises(TypeMismatchError):
        parser.parse(["-x=bad"])
    assert parser.state is ParserState.FAILED
    parser.parse(["-x=4"])
    assert parser.state is ParserState.SUCCEEDED
    assert calls == [("-x", 4), ("-y", 2.0)]


def test_callback_exception_propagates():
    parser = ParameterParser()

    def explode():
        raise RuntimeError("boom")

    parser.add_parameter("-e", callback=explode)
    with pytest.raises(RuntimeError, match="boom"):
        parser.parse(["-e"])
    assert parser.state is ParserState.FAILED


def test_parse_from_callback_is_rejected():
    parser = ParameterParser()
    parser.add_parameter("-r", callback=lambda: parser.parse([]))
    with pytest.raises(ParseError) as excinfo:
        parser.parse(["-r"])
    assert "cannot be called from a parameter callback" in str(excinfo.value)
    assert parser.state is ParserState.FAILED


def test_parse_defaults_to_sys_argv(monkeypatch, parser, calls):
    monkeypatch.setattr("sys.argv", ["app", "-b=argv"])
    parser.parse()
    assert calls[0] == ("-b", "argv")


def test_plan_invokes_nothing(parser, calls):
    extractor = NameValueExtractor()
    tokens = [
        ParsedToken(extractor.split("-x=5"), parser.get_parameter("-x")),
        ParsedToken(extractor.split("-a"), parser.get_parameter("-a")),
    ]
    dispatcher = Dispatcher(parser.registry)
    invocations = dispatcher.plan(tokens)
    assert calls == []
    planned = [(i.parameter.short_name, i.value, i.from_default) for i in invocations]
    assert planned == [("-x", 5, False), ("-a", None, False), ("-y", 2.0, True)]
    assert dispatcher.execute(invocations) == {"-x": 5, "-a": None, "-y": 2.0}
    assert calls == [("-x", 5), ("-a",), ("-y", 2.0)]


def test_dispatch_is_logged(parser, caplog):
    with caplog.at_level(logging.DEBUG, logger="clparam"):
        parser.parse(["-a"])
    assert "Dispatched 3 callback(s)" in caplog.text
