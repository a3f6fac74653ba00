"""Command-line entry point that answers contest-style input read from stdin."""

import argparse
import sys

from contestkit.arrays import collecting_game
from contestkit.numtheory import max_shifted_gcd
from contestkit.search import bound_positions
from contestkit.strings import typing_cost


class _Tokens:
    """Whitespace-separated tokens of the input, consumed in order."""

    def __init__(self, text):
        self._items = iter(text.split())

    def word(self):
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self):
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count):
        if count < 0:
            raise ValueError("a count must not be negative")
        return [self.number() for _ in range(count)]


def _cases(tokens):
    """Yield once for each test case announced by the leading count."""
    count = tokens.number()
    if count < 0:
        raise ValueError("the number of test cases must not be negative")
    for _ in range(count):
        yield


def _double(tokens):
    for _ in _cases(tokens):
        yield str(2 * tokens.number())


def _typing_cost(tokens):
    for _ in _cases(tokens):
        length = tokens.number()
        text = tokens.word()
        if len(text) != length:
            raise ValueError(f"expected a string of length {length}, got {len(text)}")
        yield str(typing_cost(text))


def _shifted_gcd(tokens):
    for _ in _cases(tokens):
        values = tokens.numbers(tokens.number())
        yield str(max_shifted_gcd(values))


def _collecting_game(tokens):
    for _ in _cases(tokens):
        values = tokens.numbers(tokens.number())
        if not values:
            raise ValueError("values must not be empty")
        yield " ".join(map(str, collecting_game(values)))


def _bounds(tokens):
    count = tokens.number()
    target = tokens.number()
    ordered, upper, lower = bound_positions(tokens.numbers(count), target)
    yield " ".join(map(str, ordered))
    yield str(upper)
    yield str(lower)


_COMMANDS = {
    "double": (_double, "print twice each of the given numbers"),
    "typing-cost": (_typing_cost, "typing cost of binary strings after one reversal"),
    "shifted-gcd": (_shifted_gcd, "largest gcd of min and max shifted by 0..100"),
    "collecting-game": (_collecting_game, "score of each start in the collecting game"),
    "bounds": (_bounds, "sorted values with upper and lower bound of a target"),
}


def _parser():
    parser = argparse.ArgumentParser(
        prog="contestkit",
        description="Solve contest problems; the input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv=None):
    """Run the command named in ``argv`` on standard input; return the exit status."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    tokens = _Tokens(sys.stdin.read())
    try:
        lines = list(handler(tokens))
    except ValueError as error:
        print(f"contestkit: error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())