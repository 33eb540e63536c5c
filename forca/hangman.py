"""Two-player hangman: one player types the secret word, the other guesses letters."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence, TextIO

from forca.gallows import MAX_ERRORS, render_gallows

CLEAR_LINES = 30
HIDDEN = "_"


class Game:
    """State of one hangman round: the secret, the revealed letters and the errors."""

    def __init__(self, secret: str, max_errors: int = MAX_ERRORS) -> None:
        if not secret:
            raise ValueError("the secret word must not be empty")
        self.secret = secret
        self.max_errors = max_errors
        self.errors = 0
        self._revealed = [HIDDEN] * len(secret)

    @property
    def revealed(self) -> str:
        """The word as the guessing player sees it."""
        return "".join(self._revealed)

    def guess(self, letter: str) -> int:
        """Reveal every occurrence of letter; count an error if there is none.

        Returns the number of errors so far.
        """
        if len(letter) != 1:
            raise ValueError(f"a guess must be a single character, got {letter!r}")
        hits = [pos for pos, char in enumerate(self.secret) if char == letter]
        for pos in hits:
            self._revealed[pos] = letter
        if not hits:
            self.errors += 1
        return self.errors

    def won(self) -> bool:
        return self.revealed == self.secret

    def lost(self) -> bool:
        return self.errors >= self.max_errors

    def finished(self) -> bool:
        return self.won() or self.lost()

    def display(self) -> str:
        """The guessing line, each character followed by a space."""
        return "\nAdivinhe: " + "".join(f"{char} " for char in self._revealed)

    def result_message(self) -> str:
        if self.won():
            return "\nParabéns! Você acertou a palavra!\n"
        return f"\nFim de jogo! A palavra era: {self.secret}\n"


def clear_screen_text() -> str:
    """Blank lines that push the secret word off the visible screen."""
    return "\n" * CLEAR_LINES


def play(secret: str, read_letter: Callable[[], str], write: Callable[[str], object]) -> Game:
    """Run a full round, reading guesses with read_letter and writing output with write."""
    game = Game(secret)
    write(clear_screen_text())
    write(render_gallows(game.errors))
    write(game.display())
    while not game.finished():
        write("\nLetra: ")
        game.guess(read_letter())
        write(render_gallows(game.errors))
        write(game.display())
    write(game.result_message())
    return game


class _TokenReader:
    """Reads whitespace-separated words and single characters from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _skip_whitespace(self) -> None:
        self._buffer = self._buffer.lstrip()
        while not self._buffer:
            line = self._stream.readline()
            if not line:
                raise EOFError("no more input")
            self._buffer = line.lstrip()

    def word(self) -> str:
        self._skip_whitespace()
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self) -> str:
        self._skip_whitespace()
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char


def main(argv: Sequence[str] | None = None) -> int:
    """Play one round on the terminal."""
    parser = argparse.ArgumentParser(prog="forca", description="Two-player hangman.")
    parser.parse_args(argv)

    reader = _TokenReader(sys.stdin)

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    try:
        write("JOGADOR 1: \n")
        write("Informe a palavra secreta: \n")
        secret = reader.word()
        play(secret, reader.char, write)
    except EOFError:
        print("\nentrada encerrada", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())