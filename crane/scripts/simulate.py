import json
import time
from argparse import ArgumentParser

from pydantic import BaseModel, Field

from crane.consts import MAX_GUESSES, MAX_SIMULATION_TURNS
from crane.environment import BatchRoller
from crane.guesser import GUESSERS, create_guesser
from crane.metrics import compute_metrics
from crane.render_utils import render_rollout
from crane.tracker import Tracker
from crane.vocab import DEFAULT_ANSWERS_PATH, DEFAULT_DICTIONARY_PATH, load_answers, load_dictionary


class SimulationConfig(BaseModel):
    dictionary_path: str = DEFAULT_DICTIONARY_PATH
    answers_path: str = DEFAULT_ANSWERS_PATH
    guesser: str = "naive"
    max_turns: int = Field(default=MAX_SIMULATION_TURNS, ge=1)
    num_games: int | None = Field(default=None, ge=1)


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument(
        "--dictionary_path",
        type=str,
        default=DEFAULT_DICTIONARY_PATH,
        help="File with one '<word> <frequency>' entry per line",
    )
    parser.add_argument(
        "--answers_path",
        type=str,
        default=DEFAULT_ANSWERS_PATH,
        help="File with whitespace separated answers, one game is played per answer",
    )
    parser.add_argument("--guesser", type=str, default="naive", choices=sorted(GUESSERS), help="Guessing strategy")
    parser.add_argument("--max_turns", type=int, default=MAX_SIMULATION_TURNS, help="Turn budget per game")
    parser.add_argument("--num_games", type=int, default=None, help="Only play the first n answers")
    parser.add_argument("--verbose", action="store_true", default=False, help="Print every game")
    parser.add_argument("--report_path", type=str, default=None, help="Where to write the JSON report")
    args = parser.parse_args()

    config = SimulationConfig(
        dictionary_path=args.dictionary_path,
        answers_path=args.answers_path,
        guesser=args.guesser,
        max_turns=args.max_turns,
        num_games=args.num_games,
    )

    dictionary = load_dictionary(config.dictionary_path)
    answers = load_answers(config.answers_path)[:config.num_games]
    print(f"Loaded {len(dictionary)} dictionary words and {len(answers)} answers")

    roller = BatchRoller(
        dictionary=dictionary,
        guesser_factory=lambda d: create_guesser(config.guesser, d),
        max_turns=config.max_turns,
    )
    start_time = time.time()
    rollouts = roller.run(answers)
    print(f"Playing {len(rollouts)} games took {time.time() - start_time:.2f} seconds")

    if args.verbose:
        for rollout in rollouts:
            print(render_rollout(rollout))

    tracker = Tracker(max_turns=config.max_turns)
    compute_metrics(rollouts, tracker)
    metrics = tracker.report()

    histogram = tracker.histogram()
    for num_turns, count in enumerate(histogram):
        if count:
            print(f"{num_turns:>2} turns: {count}")
    print(f"Unsolved: {tracker.unsolved}")
    if "turns_to_win_mean" in metrics:
        print(
            f"Average turns: {metrics['turns_to_win_mean']:.3f}, "
            f"Solved within {MAX_GUESSES}: {100 * metrics['wordle_win_rate']:.2f}%"
        )

    if args.report_path is not None:
        report = {
            "config": config.model_dump(),
            "metrics": metrics,
            "turn_histogram": histogram.tolist(),
            "unsolved": tracker.unsolved,
        }
        with open(args.report_path, "w") as f:
            json.dump(report, f, indent=2)


if __name__ == "__main__":
    main()
