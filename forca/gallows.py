"""Text drawings of the hangman gallows for each number of errors."""

from __future__ import annotations

import sys
from typing import Mapping, Sequence

MAX_ERRORS = 6


def _build(base: Sequence[str], steps: Sequence[Mapping[int, str]]) -> tuple[tuple[str, ...], ...]:
    lines = list(base)
    stages = []
    for step in steps:
        for index, text in step.items():
            lines[index] = text
        stages.append(tuple(lines))
    return tuple(stages)


_SMALL = _build(
    (" -----------", "|           |", "|", "|", "|", "|", "|", "-"),
    (
        {},
        {2: "|           0"},
        {3: "|           |"},
        {3: "|         --|"},
        {3: "|         --|--"},
        {4: "|          /"},
        {4: "|          / \\", 6: "|     Pergeu o jogo!"},
    ),
)

_LARGE = _build(
    ("-----------------", "|               |") + ("|",) * 8 + ("__",),
    (
        {},
        {2: "|               O"},
        {3: "|               |"},
        {3: "|              -|"},
        {3: "|              -|-"},
        {4: "|              /"},
        {4: "|              / \\", 9: "|       PERDEU O JOGO"},
    ),
)


def _render(stages: tuple[tuple[str, ...], ...], errors: int) -> str:
    if not 0 <= errors < len(stages):
        return ""
    return "".join(f"\n{line}" for line in stages[errors])


def render_gallows(errors: int) -> str:
    """Return the gallows for 0 to 6 errors, each line led by a newline; '' otherwise."""
    return _render(_SMALL, errors)


def render_large_gallows(errors: int) -> str:
    """Return the large gallows for 0 to 6 errors, each line led by a newline; '' otherwise."""
    return _render(_LARGE, errors)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the large gallows; the optional argument is the number of errors (default 2)."""
    args = list(sys.argv[1:] if argv is None else argv)
    errors = 2
    if args:
        try:
            errors = int(args[0])
        except ValueError:
            print(f"invalid number of errors: {args[0]}", file=sys.stderr)
            return 2
    sys.stdout.write(render_large_gallows(errors))
    return 0


if __name__ == "__main__":
    sys.exit(main())