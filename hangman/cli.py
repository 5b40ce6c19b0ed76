"""Console hangman game."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterator, List, Optional

from hangman.letters import LetterFunction
from hangman.puzzle import Puzzle

DICTIONARY = "dictionary_many.txt"
QUIT_WORDS = ("quit", "exit")


def _tokens(read_line: Callable[[], str]) -> Iterator[str]:
    while True:
        try:
            line = read_line()
        except EOFError:
            return
        yield from line.split()


def _pause(read_line: Callable[[], str], write: Callable[[str], object]) -> None:
    write("Press Enter to continue . . .")
    try:
        read_line()
    except EOFError:
        pass


def play(
    puzzle: Puzzle,
    letters: LetterFunction,
    read_line: Callable[[], str],
    write: Callable[[str], object],
) -> None:
    """Run puzzles until the player quits or input runs out.

    read_line returns one line of input and raises EOFError at the end.
    """
    tokens = _tokens(read_line)
    while puzzle.is_game:
        puzzle.init_puzzle()
        while puzzle.is_game and puzzle.is_alive and not puzzle.is_win:
            write("\n" * 75)
            write(
                f"Hangman! Current Lives: {puzzle.lives} | wins: {puzzle.wins}"
                f" | losses: {puzzle.losses}\n\n"
            )
            write(puzzle.puzzle_text())
            write(puzzle.board_text())
            write("Guess a letter > ")

            guess = next(tokens, None)
            if guess is None:
                puzzle.end_game()
                break

            if len(guess) == 1:
                letter = letters.check(guess)
                if puzzle.is_in_board(letter):
                    index = puzzle.find_in_answer(letter)
                    if index is None:
                        puzzle.lose_life()
                    else:
                        puzzle.open_puzzle(index)
                else:
                    puzzle.lose_life()
            elif guess in QUIT_WORDS:
                puzzle.end_game()
            else:
                write("invalid input!\n")

            if puzzle.is_win:
                puzzle.add_win()
                write(f"\nCongratulations, you correctly guessed the word [{puzzle.answer}]!\n")
                _pause(read_line, write)
            elif not puzzle.is_alive:
                puzzle.add_loss()
                write(f"\nSorry, the correct word is [{puzzle.answer}]!\n")
                _pause(read_line, write)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hangman", description="Play hangman in the console.")
    parser.add_argument(
        "dictionary",
        nargs="?",
        default=DICTIONARY,
        help=f"word list, one word per line (default: {DICTIONARY})",
    )
    args = parser.parse_args(argv)

    try:
        puzzle = Puzzle(args.dictionary, rng=random.Random())
    except OSError:
        print(f"File not found: {args.dictionary}", file=sys.stderr)
        return 1

    play(puzzle, LetterFunction(trace=_write), input, _write)
    return 0


if __name__ == "__main__":
    sys.exit(main())