"""Command line for the 3n+1, common permutation and carry counting puzzles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.cpe_numbers import carry_operations, max_cycle_length
from algokit.cpe_text import common_permutation


def _int_pairs(text: str):
    tokens = iter(text.split())
    for first, second in zip(tokens, tokens):
        yield int(first), int(second)


def _run_cycle(text: str) -> list[str]:
    return [str(max_cycle_length(a, b)) for a, b in _int_pairs(text)]


def _run_common(text: str) -> list[str]:
    lines = iter(text.splitlines())
    return [common_permutation(a, b) for a, b in zip(lines, lines)]


def _run_carry(text: str) -> list[str]:
    output = []
    for a, b in _int_pairs(text):
        if a == 0 and b == 0:
            break
        output.append(f"{carry_operations(a, b)} carry operations")
    return output


_COMMANDS = {
    "cycle": (_run_cycle, "largest 3n+1 cycle length for each pair of integers"),
    "common": (_run_common, "common permutation for each pair of lines"),
    "carry": (_run_carry, "carry operations for each pair of integers until 0 0"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algokit", description="Solve puzzles read from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, description) in _COMMANDS.items():
        commands.add_parser(name, help=description)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a puzzle over standard input and print one answer per case."""
    args = _build_parser().parse_args(argv)
    run, _ = _COMMANDS[args.command]
    try:
        lines = run(sys.stdin.read())
    except ValueError as error:
        print(f"algokit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())