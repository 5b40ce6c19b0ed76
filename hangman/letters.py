"""Letter checkers that turn a typed character into a board letter."""

from __future__ import annotations

import string
from typing import Callable, Optional

DEFAULT_LETTER = "*"


def _require_single_char(value: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")


class LetterChecker:
    """Checks whether a character is one particular letter.

    A checker built without a letter never matches and always answers with
    the default letter.
    """

    def __init__(self, letter: Optional[str] = None) -> None:
        if letter is not None:
            _require_single_char(letter)
            if letter not in string.ascii_letters:
                raise ValueError(f"checker letter must be A-Z, got {letter!r}")
            letter = letter.lower()
        self.letter = letter
        self.default_letter = DEFAULT_LETTER

    def check_my_letter(self, input_char: str) -> str:
        """Return the checker's lower-case letter on a match, else the default letter."""
        _require_single_char(input_char)
        if self.letter is not None and input_char.lower() == self.letter:
            return self.letter
        return self.default_letter

    def __repr__(self) -> str:
        return f"LetterChecker({self.letter!r})"


class LetterFunction:
    """Runs a character through one checker per letter a-z."""

    def __init__(self, trace: Optional[Callable[[str], object]] = None) -> None:
        self.checkers = [LetterChecker(c) for c in string.ascii_lowercase]
        self._trace = trace

    def check(self, input_char: str) -> str:
        """Return the matching lower-case letter, or the default letter if none matches."""
        _require_single_char(input_char)
        answers = (checker.check_my_letter(input_char) for checker in self.checkers)
        checked = next((a for a in answers if a != DEFAULT_LETTER), DEFAULT_LETTER)
        if self._trace is not None:
            self._trace(f"\ncheckedChar = {checked}\n")
        return checked