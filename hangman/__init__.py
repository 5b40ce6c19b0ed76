"""A terminal game of Hangman: puzzle state, letter checking and the console game loop."""

__version__ = "0.1.0"
__all__ = ["cli", "letters", "puzzle"]