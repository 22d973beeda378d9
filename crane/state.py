from dataclasses import dataclass, field

import more_itertools

from crane.consts import WORD_LENGTH
from crane.correctness import Correctness, Mask


@dataclass(frozen=True)
class Guess:
    word: str
    mask: Mask

    def __post_init__(self) -> None:
        assert len(self.word) == WORD_LENGTH, self.word
        assert len(self.mask) == WORD_LENGTH, self.mask
        # Lists are accepted for convenience, stored as a tuple.
        object.__setattr__(self, "mask", tuple(self.mask))

    @property
    def win(self) -> bool:
        return all(c == Correctness.CORRECT for c in self.mask)

    def matches(self, word: str) -> bool:
        """Whether `word` could be the answer that produced this guess's mask.

        Replays the consumption order of `compute` against the candidate: greens
        first, then misplaced and wrong letters from left to right.
        """
        assert len(word) == WORD_LENGTH, word

        used = [False] * WORD_LENGTH
        for idx, (guessed_letter, letter, correctness) in enumerate(zip(self.word, word, self.mask)):
            if correctness == Correctness.CORRECT:
                if guessed_letter != letter:
                    return False
                used[idx] = True
            elif guessed_letter == letter:
                # Would have been marked correct.
                return False

        for guessed_letter, correctness in zip(self.word, self.mask):
            if correctness == Correctness.CORRECT:
                continue

            unused_idx = more_itertools.first_true(
                range(WORD_LENGTH),
                default=None,
                pred=lambda idx: word[idx] == guessed_letter and not used[idx],
            )
            if correctness == Correctness.MISPLACED:
                if unused_idx is None:
                    return False
                used[unused_idx] = True
            elif unused_idx is not None:
                # A wrong letter means the answer has no occurrence left to hand out.
                return False

        return True


History = list[Guess]


def consistent(history: History, word: str) -> bool:
    return all(guess.matches(word) for guess in history)


@dataclass
class State:
    answer: str
    max_turns: int
    history: History = field(default_factory=list)

    @property
    def win(self) -> bool:
        return bool(self.history) and self.history[-1].win

    @property
    def terminal(self) -> bool:
        return self.win or len(self.history) >= self.max_turns

    @property
    def turns(self) -> int:
        return len(self.history)
