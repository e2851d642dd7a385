import pytest
from rich.console import Console

from clparam.__main__ import DemoSettings, get_parser, main
from clparam.version import __version__


@pytest.fixture(autouse=True)
def plain_consoles(monkeypatch):
    """Replace the truecolor consoles so captured output has no escape codes."""
    monkeypatch.setattr(
        "clparam.__main__.console", Console(color_system=None, width=120)
    )
    monkeypatch.setattr(
        "clparam.__main__.error_console",
        Console(color_system=None, width=120, stderr=True),
    )
    monkeypatch.setattr(
        "clparam.parser.parameter_parser.console", Console(color_system=None, width=120)
    )


def test_main_defaults(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "host=127.0.0.1 port=8000 config=None ratio=1.0 verbose=False" in out


def test_main_with_values(capsys, tmp_path):
    config = tmp_path / "demo.conf"
    config.write_text("")
    assert main(["10.0.0.1", "--port=8080", f"-c={config}", "-v", "-r=0.5"]) == 0
    out = capsys.readouterr().out
    assert "host=10.0.0.1 port=8080" in out
    assert "ratio=0.5 verbose=True" in out


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "usage: clparam" in out
    assert "options:" in out
    assert "host=" not in out


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert f"clparam {__version__}" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv, message",
    [
        (["--port=http"], "expects a uint16 value"),
        (["--port=70000"], "expects a uint16 value"),
        (["-a=localhost"], "invalid ip value 'localhost'"),
        (["-x=1"], "no such parameter"),
        (["-v", "-v"], "is repeated"),
        (["-p=1=2"], "repeated in parameter"),
    ],
)
def test_main_errors(capsys, argv, message):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert message in captured.err
    assert "usage: clparam" in captured.err
    assert captured.out == ""


def test_main_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["clparam", "--port=9000"])
    assert main() == 0
    assert "port=9000" in capsys.readouterr().out


def test_get_parser():
    settings = DemoSettings()
    parser = get_parser(settings)
    parser.parse(["::1"])
    assert settings.host == "::1"
    assert settings.port == 8000
    assert settings.ratio == 1.0
