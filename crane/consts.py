WORD_LENGTH = 5
# Wordle only allows six guesses.
MAX_GUESSES = 6
# Simulations allow more so the score distribution is not cut off.
MAX_SIMULATION_TURNS = 32
