"""ANSI terminal control: cursor movement, colours, text modes and box borders."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMAL_TEXT = "[0m"
BOLD_TEXT = "[1m"
ITALIC_TEXT = "[3m"
BLINK_TEXT = "[5m"
REVERSE_TEXT = "[7m"
HOME_CURSOR = "[f"
SHOW_CURSOR = "[?25h"
HIDE_CURSOR = "[?25l"
CLEAR_SCREEN = "[2J"

BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = 0x78
BOX_HLINE = 0x71
BOX_UPLEFT = 0x6C
BOX_UPRIGHT = 0x6B
BOX_DWNLEFT = 0x6D
BOX_DWNRIGHT = 0x6A
BOX_CROSS = 0x6E
BOX_TLEFT = 0x74
BOX_TRIGHT = 0x75
BOX_TUP = 0x77
BOX_TDOWN = 0x76
BOX_DIAMOND = 0x60
BOX_BLOCK = 0x61
BOX_DOT = 0x7E

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """Terminal colours; the upper eight are the bright variants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


def gotoxy_sequence(x: int, y: int) -> str:
    """Return the escape sequence that moves the cursor to (x, y), clamped to the screen."""
    x = 0 if x < 0 else (MAXX - 1 if x >= MAXX else x)
    y = 0 if y < 0 else (MAXY if y > MAXY else y)
    return f"{ESC}[f{ESC}[{y}B{ESC}[{x}C"


def color_sequence(fg: int, bg: int) -> str:
    """Return the escape sequence selecting foreground and background colours."""
    fg = int(fg)
    bg = int(bg)
    intensity = "0"
    if fg > Color.LIGHTGRAY:
        intensity = "1"
        fg -= 8
    return f"{ESC}[{intensity};{fg + 30};{bg + 40}m"


class Screen:
    """Writes terminal control sequences to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _control(self, code: str) -> None:
        self._write(ESC + code)

    def home_cursor(self) -> None:
        self._control(HOME_CURSOR)

    def show_cursor(self) -> None:
        self._control(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._control(HIDE_CURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self._control(CLEAR_SCREEN)

    def update(self) -> None:
        """Flush pending output to the terminal."""
        self.stream.flush()

    def set_normal(self) -> None:
        self._control(NORMAL_TEXT)

    def set_bold(self) -> None:
        self._control(BOLD_TEXT)

    def set_blink(self) -> None:
        self._control(BLINK_TEXT)

    def set_reverse(self) -> None:
        self._control(REVERSE_TEXT)

    def box_enable(self) -> None:
        self._control(BOX_ENABLE)

    def box_disable(self) -> None:
        self._control(BOX_DISABLE)

    def _put(self, x: int, y: int, char: int) -> None:
        self.gotoxy(x, y)
        self._write(chr(char))

    def draw_borders(self) -> None:
        """Clear the screen and draw a box around its whole area."""
        self.clear()
        self.box_enable()

        self._put(MINX, MINY, BOX_UPLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MINY, BOX_HLINE)
        self._put(MAXX, MINY, BOX_UPRIGHT)

        for y in range(MINY + 1, MAXY):
            self._put(MINX, y, BOX_VLINE)
            self._put(MAXX, y, BOX_VLINE)

        self._put(MINX, MAXY, BOX_DWNLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MAXY, BOX_HLINE)
        self._put(MAXX, MAXY, BOX_DWNRIGHT)

        self.box_disable()

    def init(self, draw_borders: bool = False) -> None:
        """Clear the screen, optionally draw borders, home and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Reset colours and modes, clear the screen and show the cursor."""
        self._write(f"{ESC}[0;39;49m")
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def gotoxy(self, x: int, y: int) -> None:
        self._write(gotoxy_sequence(x, y))

    def set_color(self, fg: int, bg: int) -> None:
        self._write(color_sequence(fg, bg))