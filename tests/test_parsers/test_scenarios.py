"""End-to-end invocations of small command lines."""
import pytest

from clparam.exceptions import (
    AmbiguousTokenError,
    RegistrationError,
    SemanticError,
    TypeMismatchError,
    ValidationCause,
    ValidationError,
)
from clparam.parser import ParameterParser


@pytest.fixture
def calls():
    return []


@pytest.fixture
def parser(calls):
    parser = ParameterParser(program="app")

    def show_help():
        calls.append(("-h",))

    def set_count(count: int):
        calls.append(("-c", count))

    parser.add_parameter("-h", "--help", callback=show_help)
    parser.add_parameter("-c", "--count", callback=set_count).default_value(5)
    return parser


def test_help_and_default_count(parser, calls):
    parser.parse(["-h"])
    assert calls == [("-h",), ("-c", 5)]


def test_full_name_with_value(parser, calls):
    parser.parse(["--count=10"])
    assert calls == [("-c", 10)]


def test_count_type_mismatch(parser, calls):
    with pytest.raises(TypeMismatchError):
        parser.parse(["-c=abc"])
    assert calls == []


def test_count_repeated(parser, calls):
    with pytest.raises(ValidationError) as excinfo:
        parser.parse(["-c=1", "-c=2"])
    assert excinfo.value.cause is ValidationCause.REPETITION
    assert calls == []


def test_unknown_parameter(parser, calls):
    with pytest.raises(ValidationError) as excinfo:
        parser.parse(["-z"])
    assert excinfo.value.cause is ValidationCause.UNKNOWN_PARAMETER
    assert excinfo.value.names == ["-z"]
    assert "-z" in str(excinfo.value)


def test_ambiguous_token_before_validation(calls):
    parser = ParameterParser()
    parser.add_parameter("-a", callback=lambda: calls.append("-a")).necessary()
    with pytest.raises(AmbiguousTokenError):
        parser.parse(["-x=1=2"])
    assert calls == []


def test_only_optional_parameters_without_tokens(calls):
    parser = ParameterParser()
    parser.add_parameter("-a", callback=lambda value: calls.append(("-a", value)))
    parser.add_parameter(
        "-b", callback=lambda value: calls.append(("-b", value)), value_kind=int
    ).default_value(3)
    parser.add_parameter(
        "-c", callback=lambda value: calls.append(("-c", value))
    ).default_value("x")
    parser.add_parameter("-d", callback=lambda: calls.append(("-d",)))
    parser.parse([])
    assert calls == [("-b", 3), ("-c", "x")]


def test_same_short_name_twice():
    parser = ParameterParser()
    parser.add_parameter("-a", callback=lambda: None)
    with pytest.raises(RegistrationError):
        parser.add_parameter("-a", "--again", callback=lambda: None)


def test_necessary_path(tmp_path):
    parser = ParameterParser()
    parser.add_parameter("-p", callback=lambda value: None).necessary().check_semantic(
        "path"
    )
    with pytest.raises(ValidationError) as excinfo:
        parser.parse([])
    assert excinfo.value.cause is ValidationCause.NECESSITY
    assert excinfo.value.names == ["-p"]

    nonexistent = str(tmp_path / "nonexistent")
    with pytest.raises(SemanticError) as excinfo:
        parser.parse([f"-p={nonexistent}"])
    assert excinfo.value.names == ["-p"]
    assert nonexistent in str(excinfo.value)


def test_server_command_line(tmp_path):
    config = tmp_path / "server.conf"
    config.write_text("")
    settings = {}
    parser = ParameterParser(program="server")
    parser.add_parameter(
        "-a", "--address", callback=lambda value: settings.update(host=value)
    ).default_value("127.0.0.1").check_semantic("ip").order(1)
    parser.add_parameter(
        "-p",
        "--port",
        callback=lambda value: settings.update(port=value),
        value_kind="uint16",
    ).default_value(8000)
    parser.add_parameter(
        "-c", "--config", callback=lambda value: settings.update(config=value)
    ).necessary().check_semantic("file")
    parser.add_parameter(
        "-d",
        "--debug",
        callback=lambda value: settings.update(debug=value),
        value_kind=bool,
    ).default_value(False)

    parser.parse(["::1", f"--config={config}", "-d=on"])
    assert settings == {
        "host": "::1",
        "config": str(config),
        "debug": True,
        "port": 8000,
    }

    settings.clear()
    parser.parse([f"-c={config}"])
    assert settings == {
        "config": str(config),
        "host": "127.0.0.1",
        "port": 8000,
        "debug": False,
    }
