# hangman

A game of Hangman for the terminal. A word is drawn at random from a word
list, and you guess it one letter at a time before your six lives run out.

## Installing

```
pip install .
```

## Playing

Make a word list, one word per line. By default the game reads
`dictionary_many.txt` from the directory you play from:

```
hangman
```

or name another file:

```
hangman words.txt
```

If the file cannot be read, the game prints `File not found: <file>` to
standard error and exits with status 1.

Each round shows your remaining lives, your wins and losses so far, the
hidden word as underscores, and the letters you have not yet tried:

```
Hangman! Current Lives: 6 | wins: 0 | losses: 0

     _ _ _ _ _ _ _

[a] [b] [c] [d] ...
```

At the `Guess a letter >` prompt:

- type a single character to guess it. Letters are matched without regard to
  case, and the checked letter is echoed as `checkedChar = <letter>`. A letter
  that is in the word is uncovered wherever it appears. A letter that is not
  in the word, one you have already tried, or a character that is not a
  letter costs a life.
- type `quit` or `exit` to stop playing.
- anything else longer than one character prints `invalid input!` and costs
  nothing.

Several guesses may be typed on one line, separated by spaces. The game also
ends when input runs out.

A round ends when the whole word is uncovered (a win) or your lives reach
zero (a loss); the answer is shown and the game waits for Enter before the
next round starts with a new word. Each word is used at most once per
session; when the list is used up, the word `default` is played.

## Using it from Python

- `hangman.puzzle.Puzzle(dictionary="dictionary.txt", rng=None)` holds the
  game state: `word_list`, `answer`, `puzzle_string`, `board`, `lives`,
  `wins`, `losses`, `is_game`, `is_alive` and `is_win`. Its methods include
  `init_puzzle()`, `pick_word()`, `is_in_board(letter)`,
  `find_in_answer(letter)` (an index or `None`), `open_puzzle(index)`,
  `lose_life()`, `add_win()`, `add_loss()`, `end_game()`, and `board_text()`,
  `puzzle_text()` and `word_list_text()` for display. Pass a
  `random.Random` as `rng` for repeatable word choice.
- `hangman.letters.LetterFunction(trace=None)` turns a typed character into a
  lower-case board letter with its `check(input_char)` method, or `*` if it is
  not a letter. `hangman.letters.LetterChecker` checks a single letter.
- `hangman.cli.play(puzzle, letters, read_line, write)` runs the game loop
  with the input and output functions you give it, so the game can be driven
  without a terminal. `read_line` should raise `EOFError` when input ends.

## Running the tests

```
pip install .[test]
pytest
```