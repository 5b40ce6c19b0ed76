import string

import pytest

from hangman.letters import DEFAULT_LETTER, LetterChecker, LetterFunction


def test_base_checker_always_returns_default():
    checker = LetterChecker()
    for ch in ("a", "z", "*", "1"):
        assert checker.check_my_letter(ch) == "*"


def test_default_letter_is_star():
    assert LetterChecker().default_letter == DEFAULT_LETTER == "*"


def test_letter_checker_matches_own_letter_any_case():
    checker = LetterChecker("q")
    assert checker.check_my_letter("q") == "q"
    assert checker.check_my_letter("Q") == "q"


def test_letter_checker_built_from_upper_case_returns_lower_case():
    checker = LetterChecker("Q")
    assert checker.check_my_letter("q") == "q"


def test_letter_checker_rejects_other_letters():
    checker = LetterChecker("q")
    assert checker.check_my_letter("r") == "*"
    assert checker.check_my_letter("*") == "*"


@pytest.mark.parametrize("bad", ["ab", "", "1", "*"])
def test_letter_checker_rejects_bad_letter(bad):
    with pytest.raises(ValueError):
        LetterChecker(bad)


def test_check_my_letter_rejects_multiple_chars():
    with pytest.raises(ValueError):
        LetterChecker("a").check_my_letter("aa")


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_function_returns_each_lower_case_letter(letter):
    assert LetterFunction().check(letter) == letter


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_function_lowers_upper_case(letter):
    assert LetterFunction().check(letter.upper()) == letter


@pytest.mark.parametrize("ch", ["1", "*", " ", "-", "é"])
def test_function_returns_default_for_non_letters(ch):
    assert LetterFunction().check(ch) == "*"


def test_function_has_one_checker_per_letter():
    letters = [c.letter for c in LetterFunction().checkers]
    assert "".join(letters) == string.ascii_lowercase


def test_function_traces_result():
    seen = []
    result = LetterFunction(trace=seen.append).check("B")
    assert result == "b"
    assert seen == ["\ncheckedChar = b\n"]


def test_function_traces_default():
    seen = []
    LetterFunction(trace=seen.append).check("7")
    assert seen == ["\ncheckedChar = *\n"]


@pytest.mark.parametrize("bad", ["", "ab"])
def test_function_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        LetterFunction().check(bad)