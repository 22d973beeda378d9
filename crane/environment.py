import copy
from dataclasses import dataclass
from typing import Callable

import tqdm

from crane.consts import MAX_SIMULATION_TURNS, WORD_LENGTH
from crane.correctness import compute
from crane.guesser import Guesser
from crane.state import Guess, State
from crane.vocab import Dictionary


class InvalidGuessError(ValueError):
    pass


class Environment:
    state: State | None

    def __init__(self, dictionary: Dictionary | None = None, max_turns: int = MAX_SIMULATION_TURNS) -> None:
        assert max_turns >= 0, max_turns
        self.dictionary = dictionary
        self.max_turns = max_turns
        self.state = None

    def reset(self, answer: str) -> State:
        assert len(answer) == WORD_LENGTH, answer
        self.state = State(answer=answer, max_turns=self.max_turns)
        return self.state

    def step(self, word: str) -> State:
        assert self.state is not None, "Must reset the environment before stepping"
        assert not self.state.terminal, "Cannot step from a terminal state, reset the environment"

        if self.dictionary is not None and word not in self.dictionary:
            raise InvalidGuessError(f"Guess {word!r} is not in the dictionary")

        state = copy.deepcopy(self.state)
        state.history.append(Guess(word=word, mask=compute(state.answer, word)))

        self.state = state
        return self.state


def run_game(env: Environment, answer: str, guesser: Guesser) -> State:
    state = env.reset(answer)
    while not state.terminal:
        # Guessers only see a copy, the history belongs to the game.
        state = env.step(guesser.guess(list(state.history)))
    return state


def play(
    answer: str,
    guesser: Guesser,
    max_turns: int = MAX_SIMULATION_TURNS,
    dictionary: Dictionary | None = None,
) -> int | None:
    """Plays a single game and returns the turn the answer was found on, if any."""
    state = run_game(Environment(dictionary=dictionary, max_turns=max_turns), answer, guesser)
    return state.turns if state.win else None


@dataclass(frozen=True)
class Rollout:
    answer: str
    state: State

    @property
    def win(self) -> bool:
        return self.state.win

    @property
    def turns(self) -> int | None:
        return self.state.turns if self.state.win else None

    @property
    def guesses(self) -> list[str]:
        return [guess.word for guess in self.state.history]


class BatchRoller:
    def __init__(
        self,
        dictionary: Dictionary,
        guesser_factory: Callable[[Dictionary], Guesser],
        max_turns: int = MAX_SIMULATION_TURNS,
        progress: bool = True,
    ) -> None:
        self.dictionary = dictionary
        self.guesser_factory = guesser_factory
        self.max_turns = max_turns
        self.progress = progress

    def run(self, answers: list[str]) -> list[Rollout]:
        env = Environment(dictionary=self.dictionary, max_turns=self.max_turns)

        rollouts = []
        for answer in tqdm.tqdm(answers, desc="Games", disable=not self.progress):
            state = run_game(env, answer, self.guesser_factory(self.dictionary))
            rollouts.append(Rollout(answer=answer, state=state))
        return rollouts
