import collections

from crane.correctness import Correctness
from crane.environment import Rollout
from crane.tracker import Tracker


def compute_metrics(rollouts: list[Rollout], tracker: Tracker) -> None:
    initial_guesses = collections.defaultdict(int)
    for rollout in rollouts:
        tracker.log_game(rollout.turns)

        history = rollout.state.history
        if history:
            initial_guesses[history[0].word] += 1

        for turn_id, guess in enumerate(history, start=1):
            counts = collections.Counter(guess.mask)
            tracker.log_value(f"turn_{turn_id}_correct", counts[Correctness.CORRECT])
            tracker.log_value(f"turn_{turn_id}_misplaced", counts[Correctness.MISPLACED])
            tracker.log_value(f"turn_{turn_id}_wrong", counts[Correctness.WRONG])

        guesses = rollout.guesses
        tracker.log_value("repeated_guesses", len(guesses) - len(set(guesses)))

    tracker.log_value("repeated_initial_guesses", len(rollouts) - len(initial_guesses))
