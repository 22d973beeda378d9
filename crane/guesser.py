import abc
from dataclasses import dataclass

from crane.state import History
from crane.vocab import Dictionary


class Guesser(abc.ABC):
    @abc.abstractmethod
    def guess(self, history: History) -> str:
        ...


@dataclass
class Candidate:
    word: str
    goodness: float


class Naive(Guesser):
    """Keeps every dictionary word still consistent with the feedback so far.

    Candidates are not actually ranked yet: every one gets the same goodness, so
    the first remaining word in dictionary order is guessed.
    """

    def __init__(self, dictionary: Dictionary) -> None:
        self.remaining = dict(dictionary.frequencies)

    def goodness(self, word: str, count: int) -> float:
        return 0.0

    def guess(self, history: History) -> str:
        if history:
            last = history[-1]
            self.remaining = {word: count for word, count in self.remaining.items() if last.matches(word)}

        best: Candidate | None = None
        for word, count in self.remaining.items():
            goodness = self.goodness(word, count)
            if best is None or goodness > best.goodness:
                best = Candidate(word=word, goodness=goodness)

        assert best is not None, "No dictionary word is consistent with the history, is the answer in the dictionary?"
        return best.word


GUESSERS: dict[str, type[Guesser]] = {
    "naive": Naive,
}


def create_guesser(name: str, dictionary: Dictionary) -> Guesser:
    if name not in GUESSERS:
        raise ValueError(f"Unknown guesser {name}, expected one of {sorted(GUESSERS)}")
    return GUESSERS[name](dictionary)
