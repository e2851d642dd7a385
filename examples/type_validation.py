import sys
from pathlib import Path

from rich.markup import escape

from clparam import ClparamError, ParameterParser
from clparam.console import error_console
from clparam.semantic import check_path_existence
from clparam.utils import setup_logging

setup_logging()


def config_checker(value: str) -> None:
    """Custom checker: an existing file with a .conf suffix."""
    check_path_existence(value)
    if Path(value).suffix != ".conf":
        raise ValueError("not a .conf file")


def show(name: str):
    return lambda value: print(f"{name} = {value!r}")


parser = ParameterParser(program="type_validation")
parser.add_parameter(
    "-a", "--address", callback=show("address"), help="IPv4 or IPv6 address"
).check_semantic("ip").order(1)
parser.add_parameter(
    "-c", "--config", callback=show("config"), help="Existing .conf file"
).check_semantic("path")
parser.add_parameter(
    "-w", "--workers", callback=show("workers"), value_kind="uint8", help="1-255"
).default_value(4)
parser.add_parameter(
    "-t", "--timeout", callback=show("timeout"), value_kind=float, help="Seconds"
).default_value(30)
parser.add_parameter(
    "-d", "--dry-run", callback=show("dry_run"), value_kind=bool, help="yes/no"
).default_value(False)

parser.register_semantic_checker("path", config_checker)

if __name__ == "__main__":
    try:
        parser.parse()
    except ClparamError as error:
        error_console.print(
            f"[bold red]error:[/] {escape(str(error))}", highlight=False
        )
        error_console.print(
            f"usage: {parser.get_usage(plain_text=True)}", markup=False
        )
        sys.exit(2)
