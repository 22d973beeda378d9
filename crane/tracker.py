import collections
from dataclasses import dataclass, field

import numpy as np

from crane.consts import MAX_GUESSES


@dataclass
class Tracker:
    """Outcomes of a batch of games plus any per-game feedback statistics."""

    max_turns: int
    turns_to_win: list[int] = field(default_factory=list)
    unsolved: int = 0
    values: dict[str, list[float]] = field(default_factory=lambda: collections.defaultdict(list))

    @property
    def games(self) -> int:
        return len(self.turns_to_win) + self.unsolved

    def log_game(self, turns: int | None) -> None:
        if turns is None:
            self.unsolved += 1
        else:
            assert 1 <= turns <= self.max_turns, turns
            self.turns_to_win.append(turns)

    def log_value(self, name: str, value: float) -> None:
        self.values[name].append(float(value))

    def histogram(self) -> np.ndarray:
        """Number of games won on each turn, index 0 is always empty."""
        return np.bincount(np.array(self.turns_to_win, dtype=np.int64), minlength=self.max_turns + 1)

    def report(self) -> dict[str, float]:
        turns = np.array(self.turns_to_win, dtype=np.int64)
        report = {
            "games": float(self.games),
            "unsolved": float(self.unsolved),
            "win_rate": len(turns) / self.games if self.games else 0.0,
            "wordle_win_rate": np.sum(turns <= MAX_GUESSES).item() / self.games if self.games else 0.0,
        }
        if len(turns):
            report["turns_to_win_mean"] = turns.mean().item()
            report["turns_to_win_max"] = float(turns.max())

        for name, values in self.values.items():
            report[f"{name}_mean"] = np.mean(values).item()
            report[f"{name}_total"] = np.sum(values).item()
        return report
