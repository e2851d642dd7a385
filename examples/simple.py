import sys

from rich.markup import escape

from clparam import ClparamError, ParameterParser
from clparam.console import error_console
from clparam.utils import setup_logging

setup_logging()

settings = {"count": 0, "greeting": "hello"}


def show_help() -> None:
    parser.render_help()
    sys.exit(0)


def set_count(count: int) -> None:
    settings["count"] = count


def set_greeting(greeting: str) -> None:
    settings["greeting"] = greeting


parser = ParameterParser(program="simple", help_text="Greets a number of times.")
parser.add_parameter("-h", "--help", callback=show_help, help="Show this help.")
parser.add_parameter(
    "-c", "--count", callback=set_count, help="How many greetings."
).default_value(3)
parser.add_parameter(
    "-g", "--greeting", callback=set_greeting, help="The greeting."
).default_value("hello").order(1)

# Entry point
if __name__ == "__main__":
    try:
        parser.parse()
    except ClparamError as error:
        error_console.print(
            f"[bold red]error:[/] {escape(str(error))}", highlight=False
        )
        sys.exit(2)
    for _ in range(settings["count"]):
        print(settings["greeting"])
