from crane.correctness import Correctness, Mask
from crane.environment import Rollout
from crane.state import Guess

COLORS = {
    Correctness.CORRECT: "🟩",
    Correctness.MISPLACED: "🟨",
    Correctness.WRONG: "⬛",
}


def render_mask(mask: Mask) -> str:
    return "".join(COLORS[correctness] for correctness in mask)


def render_guess(guess: Guess) -> str:
    return f"{guess.word.upper()} {render_mask(guess.mask)}"


def render_rollout(rollout: Rollout) -> str:
    outcome = f"solved in {rollout.turns}" if rollout.win else "unsolved"
    lines = [f"Answer: {rollout.answer} ({outcome})"]
    for turn_id, guess in enumerate(rollout.state.history, start=1):
        lines.append(f"  {turn_id:>2}. {render_guess(guess)}")
    return "\n".join(lines)
