# main.py

"""
Command-line shell for the smartcalc integer calculator.

Reads one line at a time, hands it to a Session and prints whatever comes
back. Interactive terminals get a prompt_toolkit prompt with history; piped
input is read line by line with input(). Everything the calculator actually
computes lives in the session and the modules behind it.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, InMemoryHistory
from pydantic import ValidationError

from smartcalc.config import Settings
from smartcalc.session import Outcome, Session
from smartcalc.status import Status

logger = logging.getLogger(__name__)

BANNER = "smartcalc - integer calculator with variables. Type /help for help, /exit to quit."

HELP_TEXT = """
The program handles basic calculator operations on integers of any size.

COMMANDS
    /help
        prints this help
    /exit
        ends the program

Type an expression built from numbers, variables and the SUPPORTED OPERATORS
and press ENTER to get the result. Spaces are ignored.

Declare variables with '=', e.g. 'count = 50' or 'other = count', then use
them in expressions or show their value by typing the name on its own.
Variable names are made of Latin letters only and are case-sensitive.

SUPPORTED OPERATORS
    +   addition
    -   subtraction and negation
    *   multiplication
    /   integer division, rounding toward zero
    ()  parentheses

Repeated signs are collapsed: '2 -- 3' is '2 + 3', '2 --- 3' is '2 - 3'.

EXAMPLES ('>' marks user input):
> a = 5
> b = 3
> b
3
> (a + 5) * b / 3 + (4*5+b)
33
> /exit
Bye!
"""


def show_help() -> str:
    """Return the static help text."""
    return HELP_TEXT.strip()


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[Session] = None):
        self.settings = settings or Settings()
        self.session = session or Session()

    def _make_prompt_session(self) -> PromptSession:
        if self.settings.history_file:
            history = FileHistory(self.settings.history_file)
        else:
            history = InMemoryHistory()
        return PromptSession(history=history)

    def handle_line(self, line: str) -> bool:
        """Process one line and print its output. Returns False once the session should end."""
        outcome: Outcome = self.session.process_line(line)
        if outcome.is_exit:
            print(self.settings.exit_message)
            return False
        if outcome.status is Status.COMMAND:
            print(show_help())
        elif outcome.output is not None:
            if outcome.internal:
                print(outcome.output, file=sys.stderr)
            else:
                print(outcome.output)
        return True

    def repl_loop(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        """Run until /exit or end of input.

        ``read_line`` takes the prompt and returns one line, raising EOFError at
        end of input. By default a prompt_toolkit session is used on a terminal
        and input() otherwise.
        """
        if read_line is None:
            if sys.stdin.isatty():
                read_line = self._make_prompt_session().prompt
            else:
                read_line = input
        if self.settings.show_banner:
            print(BANNER)
        while True:
            try:
                line = read_line(self.settings.prompt)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print(self.settings.exit_message)
                break
            if not self.handle_line(line):
                break


# --------------------------
# Entry point
# --------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartcalc",
        description="Interactive calculator for arbitrarily large integers with variables.",
    )
    parser.add_argument(
        "-e", "--expression",
        action="append",
        default=[],
        help="Evaluate this line and exit instead of starting the REPL (repeatable, in order).",
    )
    parser.add_argument("--prompt", type=str, help="Prompt string (default: '> ').")
    parser.add_argument("--log-level", type=str, help="Logging level (default: WARNING).")
    parser.add_argument("--history-file", type=str, help="Keep input history in this file.")
    parser.add_argument(
        "--banner",
        action="store_true",
        default=None,
        help="Print a short banner before the first prompt.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env(
            prompt=args.prompt,
            log_level=args.log_level,
            history_file=args.history_file,
            show_banner=args.banner,
        )
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Starting smartcalc with settings: {settings.model_dump()}")

    repl = REPL(settings)
    if args.expression:
        for line in args.expression:
            if not repl.handle_line(line):
                break
        return 0

    repl.repl_loop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
