import itertools

import pytest

from crane.consts import WORD_LENGTH
from crane.correctness import Correctness, compute
from crane.state import Guess, State, consistent

C = Correctness.CORRECT
M = Correctness.MISPLACED
W = Correctness.WRONG

WORDS = ["abcde", "aabbb", "azzaz", "steep", "sleek", "eerie", "speed", "abbey", "kayak", "geese", "total", "allot"]


def test_matches():
    assert Guess("abcde", [C, C, C, C, C]).matches("abcde")
    assert not Guess("abcdf", [C, C, C, C, C]).matches("abcde")
    assert Guess("abcde", [W, W, W, W, W]).matches("mnopq")
    assert Guess("abcde", [M, M, M, M, M]).matches("eabcd")


def test_matches_repeated_letters():
    assert Guess("baaaa", [W, C, M, W, W]).matches("aaccc")
    assert not Guess("baaaa", [W, C, M, W, W]).matches("caacc")


def test_misplaced_letter_cannot_stay_in_place():
    assert not Guess("abcde", [M, W, W, W, W]).matches("axxxx")
    assert not Guess("abcde", [M, W, W, W, W]).matches("xxxxx")
    assert Guess("abcde", [M, W, W, W, W]).matches("xaxxx")


def test_wrong_letter_accounted_elsewhere():
    # The answer has exactly one "e": the green one.
    guess = Guess("eerie", [W, C, W, W, W])
    assert guess.matches("sends")
    assert not guess.matches("seeds")
    assert not guess.matches("xexxe")


def test_answer_always_matches():
    for answer, word in itertools.product(WORDS, repeat=2):
        assert Guess(word, compute(answer, word)).matches(answer), (answer, word)


def test_matches_agrees_with_compute():
    for answer, word, candidate in itertools.product(WORDS, repeat=3):
        guess = Guess(word, compute(answer, word))
        assert guess.matches(candidate) == (compute(candidate, word) == guess.mask), (answer, word, candidate)


def test_pruning_after_allot():
    words = ["total", "stoal", "allot", "tally", "alloy", "atoll"]
    guess = Guess("allot", compute("total", "allot"))
    assert guess.mask == (M, M, W, M, M)

    remaining = [word for word in words if guess.matches(word)]
    assert remaining == ["total", "stoal"]


def test_refiltering_removes_nothing():
    guess = Guess("steep", compute("sleek", "steep"))
    remaining = [word for word in WORDS if guess.matches(word)]
    assert "sleek" in remaining
    assert [word for word in remaining if guess.matches(word)] == remaining


def test_consistent():
    history = [
        Guess("allot", compute("total", "allot")),
        Guess("stoal", compute("total", "stoal")),
    ]
    assert consistent(history, "total")
    assert not consistent(history, "stoal")
    assert consistent([], "abcde")


def test_guess_is_immutable():
    guess = Guess("abcde", [C, C, C, C, C])
    assert guess.mask == (C,) * WORD_LENGTH
    with pytest.raises(AttributeError):
        guess.word = "fghij"


def test_guess_preconditions():
    with pytest.raises(AssertionError):
        Guess("abcd", [C, C, C, C])
    with pytest.raises(AssertionError):
        Guess("abcde", [C, C, C, C])
    with pytest.raises(AssertionError):
        Guess("abcde", [C, C, C, C, C]).matches("abcdef")


def test_state():
    state = State(answer="abcde", max_turns=2)
    assert not state.win
    assert not state.terminal

    state.history.append(Guess("fghij", compute("abcde", "fghij")))
    assert state.turns == 1
    assert not state.terminal

    state.history.append(Guess("abcde", compute("abcde", "abcde")))
    assert state.win
    assert state.terminal
