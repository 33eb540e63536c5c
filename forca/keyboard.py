"""Non-blocking single-key input from a terminal."""

from __future__ import annotations

import os
import termios


class Keyboard:
    """Puts a terminal in raw-ish mode and reads single keystrokes."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._initial: list | None = None
        self._settings: list | None = None
        self._peek: int | None = None

    def __enter__(self) -> "Keyboard":
        self.init()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def init(self) -> None:
        """Disable line buffering, echo and signal keys on the terminal."""
        self._initial = termios.tcgetattr(self.fd)
        settings = termios.tcgetattr(self.fd)
        settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        settings[6][termios.VMIN] = 1
        settings[6][termios.VTIME] = 0
        self._settings = settings
        termios.tcsetattr(self.fd, termios.TCSANOW, settings)

    def destroy(self) -> None:
        """Restore the terminal settings saved by init."""
        if self._initial is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._initial)
            self._initial = None
            self._settings = None

    def _set_min(self, value: int) -> None:
        if self._settings is None:
            raise RuntimeError("keyboard is not initialised")
        self._settings[6][termios.VMIN] = value
        termios.tcsetattr(self.fd, termios.TCSANOW, self._settings)

    def keyhit(self) -> bool:
        """Return True if a key is waiting, without blocking."""
        if self._peek is not None:
            return True
        self._set_min(0)
        try:
            data = os.read(self.fd, 1)
        finally:
            self._set_min(1)
        if len(data) == 1:
            self._peek = data[0]
            return True
        return False

    def readch(self) -> int:
        """Return the next key's byte value, blocking until one arrives."""
        if self._peek is not None:
            ch, self._peek = self._peek, None
            return ch
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("no more input")
        return data[0]