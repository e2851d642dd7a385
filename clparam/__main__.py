"""
clparam Command Line Parameters

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demo entry point: `python -m clparam -h`, `python -m clparam --port=8080`.
"""

import sys
from dataclasses import dataclass
from typing import Sequence

from rich.markup import escape

from clparam.console import console, error_console
from clparam.exceptions import ClparamError
from clparam.parser import ParameterParser
from clparam.version import __version__


class ExitRequest(Exception):
    """Raised by the help and version callbacks to stop after printing."""


@dataclass
class DemoSettings:
    """Collects the values dispatched to the demo parameters."""

    host: str = ""
    port: int = 0
    config: str | None = None
    verbose: bool = False
    ratio: float = 0.0


def get_parser(settings: DemoSettings) -> ParameterParser:
    parser = ParameterParser(
        program="clparam",
        help_text="Demonstrates parameter registration, validation and dispatch.",
        help_epilog="Values are given as name=value, the address also unnamed.",
    )

    def show_help() -> None:
        parser.render_help()
        raise ExitRequest()

    def show_version() -> None:
        console.print(f"clparam {__version__}")
        raise ExitRequest()

    def set_verbose() -> None:
        settings.verbose = True

    def set_host(host: str) -> None:
        settings.host = host

    def set_port(port: int) -> None:
        settings.port = port

    def set_config(path: str) -> None:
        settings.config = path

    def set_ratio(ratio: float) -> None:
        settings.ratio = ratio

    parser.add_parameter(
        "-h", "--help", callback=show_help, help="Show this help message."
    )
    parser.add_parameter("--version", callback=show_version, help="Show the version.")
    parser.add_parameter(
        "-v", "--verbose", callback=set_verbose, help="Verbose output."
    )
    parser.add_parameter(
        "-a", "--address", callback=set_host, help="Address to bind."
    ).default_value("127.0.0.1").check_semantic("ip").order(1)
    parser.add_parameter(
        "-p", "--port", callback=set_port, value_kind="uint16", help="Port to bind."
    ).default_value(8000)
    parser.add_parameter(
        "-c", "--config", callback=set_config, help="Existing configuration file."
    ).check_semantic("path")
    parser.add_parameter(
        "-r", "--ratio", callback=set_ratio, help="Sampling ratio."
    ).default_value(1)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = DemoSettings()
    parser = get_parser(settings)
    try:
        parser.parse(sys.argv[1:] if argv is None else argv)
    except ExitRequest:
        return 0
    except ClparamError as error:
        error_console.print(
            f"[bold red]error:[/] {escape(str(error))}", highlight=False
        )
        error_console.print(
            f"usage: {parser.get_usage(plain_text=True)}", markup=False
        )
        return 2

    console.print(
        f"host={settings.host} port={settings.port} config={settings.config} "
        f"ratio={settings.ratio} verbose={settings.verbose}",
        markup=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
