import enum

from crane.consts import WORD_LENGTH


class Correctness(enum.StrEnum):
    # Green
    CORRECT = "correct"
    # Yellow
    MISPLACED = "misplaced"
    # Gray
    WRONG = "wrong"


Mask = tuple[Correctness, ...]


def compute(answer: str, guess: str) -> Mask:
    assert len(answer) == len(guess) == WORD_LENGTH, (answer, guess)

    mask = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH
    for idx, (answer_letter, guessed_letter) in enumerate(zip(answer, guess)):
        if answer_letter == guessed_letter:
            mask[idx] = Correctness.CORRECT
            used[idx] = True

    for idx, guessed_letter in enumerate(guess):
        if mask[idx] == Correctness.CORRECT:
            continue

        for answer_idx, answer_letter in enumerate(answer):
            if answer_letter == guessed_letter and not used[answer_idx]:
                used[answer_idx] = True
                mask[idx] = Correctness.MISPLACED
                break

    return tuple(mask)
