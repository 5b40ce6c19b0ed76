"""Hangman puzzle state: dictionary, board of unused letters, lives and score."""

from __future__ import annotations

import random
import string
from typing import List, Optional

DEFAULT_DICTIONARY = "dictionary.txt"
FALLBACK_WORD = "default"
STARTING_LIVES = 6
HIDDEN = "_"


class Puzzle:
    """One game of hangman made of successive puzzles."""

    def __init__(
        self,
        dictionary: str = DEFAULT_DICTIONARY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.word_list: List[str] = []
        self.wins = 0
        self.losses = 0
        self.lives = 0
        self.is_game = False
        self.is_alive = False
        self.is_win = False
        self.answer = ""
        self.puzzle_string = ""
        self.board = ""
        self.init_game(dictionary)

    def init_game(self, dictionary: str) -> None:
        """Reset the score and load words from the dictionary file."""
        self.wins = 0
        self.losses = 0
        self.is_game = True
        self.init_dictionary(dictionary)

    def init_dictionary(self, path: str) -> None:
        """Append every line of the file to the word list.

        Raises FileNotFoundError (or another OSError) if the file cannot be read.
        """
        with open(path, encoding="utf-8") as handle:
            self.word_list.extend(line.removesuffix("\n") for line in handle)

    def init_puzzle(self) -> None:
        """Restore lives and the board, and pick a new hidden word."""
        self.is_alive = True
        self.is_win = False
        self.lives = STARTING_LIVES
        self.board = string.ascii_lowercase
        self.answer = self.pick_word()
        self.puzzle_string = HIDDEN * len(self.answer)

    def pick_word(self) -> str:
        """Remove and return a random word, or the fallback word if none are left."""
        if not self.word_list:
            return FALLBACK_WORD
        return self.word_list.pop(self._rng.randrange(len(self.word_list)))

    def is_in_board(self, letter: str) -> bool:
        """Take the letter off the board; False if it was not there."""
        if len(letter) != 1 or letter not in self.board:
            return False
        self.board = self.board.replace(letter, "", 1)
        return True

    def find_in_answer(self, letter: str) -> Optional[int]:
        """Index of the first occurrence of the letter in the answer, or None."""
        if len(letter) != 1:
            return None
        index = self.answer.find(letter)
        return None if index < 0 else index

    def open_puzzle(self, index: int) -> None:
        """Reveal the letter at index and every later occurrence of it."""
        if not 0 <= index < len(self.answer):
            raise IndexError(f"answer index {index} out of range")
        letter = self.answer[index]
        self.puzzle_string = "".join(
            letter if i == index or (i > index and shown_letter == letter) else shown
            for i, (shown_letter, shown) in enumerate(zip(self.answer, self.puzzle_string))
        )
        if HIDDEN not in self.puzzle_string:
            self.is_win = True

    def lose_life(self) -> None:
        self.lives -= 1
        if self.lives < 1:
            self.is_alive = False

    def add_win(self) -> None:
        self.wins += 1

    def add_loss(self) -> None:
        self.losses += 1

    def end_game(self) -> None:
        self.is_game = False

    def board_text(self) -> str:
        """The letters still available, each in brackets."""
        return "".join(f"[{c}] " for c in self.board) + "\n\n"

    def puzzle_text(self) -> str:
        """The partly revealed word, letters separated by spaces."""
        return "     " + "".join(f"{c} " for c in self.puzzle_string) + "\n\n"

    def word_list_text(self) -> str:
        """The remaining words, one per line."""
        return "".join(f"{word}\n" for word in self.word_list)