"""Two-player hangman (forca) for the terminal, with gallows drawings and ANSI screen, keyboard and timer helpers."""

__version__ = "0.1.0"