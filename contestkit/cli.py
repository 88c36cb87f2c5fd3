"""Command-line front end that answers problem instances read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from .graphs import coach_teams
from .numbers import NoSolutionError, is_psycho
from .searching import staircase_heights


class _Tokens:
    """Whitespace-separated integers taken one at a time from a text stream."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def next_int(self) -> int:
        try:
            word = next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.next_int() for _ in range(count)]


def _scuza(tokens: _Tokens, out: TextIO) -> None:
    for _ in range(tokens.next_int()):
        steps_count = tokens.next_int()
        legs_count = tokens.next_int()
        steps = tokens.ints(steps_count)
        legs = tokens.ints(legs_count)
        heights = staircase_heights(steps, legs)
        out.write("".join(f"{height} " for height in heights) + "\n")


def _coach(tokens: _Tokens, out: TextIO) -> None:
    students = tokens.next_int()
    pair_count = tokens.next_int()
    pairs = [(tokens.next_int(), tokens.next_int()) for _ in range(pair_count)]
    try:
        teams = coach_teams(students, pairs)
    except NoSolutionError:
        out.write("-1")
        return
    for team in teams:
        out.write("".join(f"{member} " for member in team) + "\n")


def _psycho(tokens: _Tokens, out: TextIO) -> None:
    for _ in range(tokens.next_int()):
        verdict = "Psycho Number" if is_psycho(tokens.next_int()) else "Ordinary Number"
        out.write(verdict + "\n")


_COMMANDS: dict[str, tuple[Callable[[_Tokens, TextIO], None], str]] = {
    "scuza": (_scuza, "height reached on a staircase for each leg length"),
    "coach": (_coach, "split students into teams of three"),
    "psycho": (_psycho, "classify numbers by the parity of their prime exponents"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve a problem instance read from standard input or a file.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary)
        sub.add_argument(
            "input",
            nargs="?",
            help="file holding the instance (default: standard input)",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen solver and return the process exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        solver, _ = _COMMANDS[args.command]
        solver(_Tokens(text), sys.stdout)
    except (OSError, ValueError) as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())