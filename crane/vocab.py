import os
import re
import types
from typing import Iterator, Mapping

from crane.consts import WORD_LENGTH

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
DEFAULT_DICTIONARY_PATH = os.path.join(DATA_DIR, "dictionary.txt")
DEFAULT_ANSWERS_PATH = os.path.join(DATA_DIR, "answers.txt")

WORD_PATTERN = re.compile(f"[a-z]{{{WORD_LENGTH}}}")


def is_valid_word(word: str) -> bool:
    return WORD_PATTERN.fullmatch(word) is not None


class Dictionary:
    """Read-only word to frequency mapping shared by every game and guesser."""

    def __init__(self, frequencies: Mapping[str, int]) -> None:
        for word, count in frequencies.items():
            assert is_valid_word(word), word
            assert count >= 0, (word, count)

        self.frequencies = types.MappingProxyType(dict(frequencies))
        self.words = frozenset(self.frequencies)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.frequencies)


def parse_dictionary_line(line: str) -> tuple[str, int]:
    word, sep, count = line.partition(" ")
    if not sep:
        raise ValueError("every line must have the word and its frequency count")
    if not is_valid_word(word):
        raise ValueError(f"{word!r} is not a {WORD_LENGTH} letter lowercase word")
    if not (count.isascii() and count.isdigit()):
        raise ValueError(f"frequency count {count!r} is not a non-negative integer")
    return word, int(count)


def load_dictionary(path: str = DEFAULT_DICTIONARY_PATH) -> Dictionary:
    frequencies = {}
    with open(path, "r") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue

            try:
                word, count = parse_dictionary_line(line)
            except ValueError as e:
                raise ValueError(f"{path}:{line_number}: {e}") from e
            frequencies[word] = count

    return Dictionary(frequencies)


def load_answers(path: str = DEFAULT_ANSWERS_PATH) -> list[str]:
    with open(path, "r") as f:
        answers = f.read().split()

    for answer in answers:
        if not is_valid_word(answer):
            raise ValueError(f"{path}: {answer!r} is not a {WORD_LENGTH} letter lowercase answer")
    return answers
