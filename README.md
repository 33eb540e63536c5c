# forca

A two-player game of hangman (*forca*) played in the terminal.

Player 1 types a secret word. Thirty blank lines then scroll it off the
screen, and player 2 guesses the word one letter at a time. Every letter
that is not in the word adds a piece to the gallows. After six misses the
game is lost. If every letter is guessed before then, the game is won.
Letters are matched exactly, so upper and lower case count as different
letters.

The game speaks Portuguese.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
forca
```

```
JOGADOR 1:
Informe a palavra secreta:
banana
```

Player 2 then sees the empty gallows and one underscore for each letter of
the word, and is asked for letters:

```
Adivinhe: _ _ _ _ _ _
Letra: a
```

Input is read from standard input, a word and then one character at a
time, with whitespace skipped in between. When the round ends, the game
either congratulates the player or shows the word. If input runs out
before the round ends, `forca` prints `entrada encerrada` to standard error
and exits with status 1.

To print one gallows drawing on its own:

```
forca-gallows        # the drawing for 2 errors
forca-gallows 6      # the drawing for any number from 0 to 6
```

A number outside 0–6 prints nothing. An argument that is not a number is
reported on standard error, and the command exits with status 2.

## Using it from Python

The game logic is in `forca.hangman`:

```python
from forca.hangman import Game

game = Game("banana", max_errors=6)
game.guess("a")          # returns the number of errors so far
game.guess("x")
print(game.revealed)     # "_a_a_a"
print(game.display())
if game.finished():
    print(game.result_message())
```

An empty secret word raises `ValueError`. So does a guess that is not
exactly one character.

`Game.won()`, `Game.lost()` and `Game.finished()` report the state of the
round. `play(secret, read_letter, write)` runs a whole round. It takes any
function that returns letters and any function that accepts output text,
and it returns the finished `Game`. `clear_screen_text()` returns the blank
lines that hide the secret word.

The gallows drawings come from `forca.gallows`. `render_gallows(errors)` and
`render_large_gallows(errors)` return the drawing for 0 to 6 misses, with a
newline before each line. Any other number gives an empty string.

## Terminal helpers

The package also has a few small building blocks for terminal programs:

- `forca.screen`: `Screen` writes ANSI control sequences to a stream, which
  is standard output by default. It covers cursor movement and visibility,
  clearing, colours from `Color`, normal, bold, blink and reverse text, and
  box-drawing borders (`init`, `destroy`, `draw_borders`). The functions
  `gotoxy_sequence(x, y)` and `color_sequence(fg, bg)` return those
  sequences as strings. Positions are clamped to an 80×24 screen.
- `forca.keyboard`: `Keyboard` turns off line buffering, echo and signal
  keys on a terminal. It offers `keyhit()`, which checks for a key without
  blocking, and `readch()`, which returns the next key's byte value. When
  used as a context manager it restores the terminal on exit. It needs a
  POSIX terminal.
- `forca.timer`: `Timer(delay_ms)` has `time_over()`, which returns `True`
  once the delay has passed and then restarts the interval. It also has
  `elapsed_ms()` and `report()`.

## What it does not do

The `forca` game does not use the screen, keyboard or timer helpers. It
runs on plain line-based input and output. The game does not save players
or keep a table of scores.