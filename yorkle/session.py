import copy
import sys
from typing import TextIO

from yorkle.consts import WORD_SIZE
from yorkle.evaluator import evaluate
from yorkle.render import format_outcome
from yorkle.state import GameState, GuessOutcome
from yorkle.tracker import Tracker
from yorkle.vocab import WordCatalog


class InvalidGuess(Exception):
    def __init__(self, guess: str) -> None:
        super().__init__(f"'{guess}' is not a valid word.")
        self.guess = guess


class GameSession:
    state: GameState
    answer: str

    def __init__(self, catalog: WordCatalog, answer: str) -> None:
        assert len(answer) == WORD_SIZE, f"Answer must have {WORD_SIZE} letters"
        self.catalog = catalog
        self.answer = answer
        self.state = GameState()

    def reset(self, state: GameState | None = None) -> GameState:
        self.state = copy.deepcopy(state) if state is not None else GameState()
        return self.state

    def validate(self, guess: str) -> None:
        if len(guess) != WORD_SIZE or not self.catalog.contains(guess):
            raise InvalidGuess(guess)

    def step(self, guess: str) -> GuessOutcome:
        assert not self.state.terminal, "Cannot step from a terminal state, reset the session"
        self.validate(guess)

        outcome = evaluate(self.answer, guess)
        self.state.outcomes.append(outcome)
        return outcome


class AttemptReader:
    """Reads guesses one whitespace-separated token at a time, lowercased."""

    def __init__(self, stream: TextIO, prompt_stream: TextIO | None = None) -> None:
        self.stream = stream
        self.prompt_stream = prompt_stream
        self.pending: list[str] = []

    def read(self, num_attempt: int) -> str | None:
        print(f"Attempt #{num_attempt}: ", end="", flush=True, file=self.prompt_stream or sys.stdout)
        while not self.pending:
            line = self.stream.readline()
            if not line:
                return None
            self.pending = line.split()

        return self.pending.pop(0).lower()


def play(session: GameSession, reader: AttemptReader, tracker: Tracker | None = None) -> GameState | None:
    """Plays until the session is terminal. Returns None if the input runs out first."""
    tracker = tracker or Tracker()
    state = session.state
    while not state.terminal:
        with tracker.timer("attempt_time"):
            guess = reader.read(state.num_attempts + 1)
        if guess is None:
            return None

        try:
            outcome = session.step(guess)
        except InvalidGuess as e:
            tracker.increment("invalid_guesses")
            print(e, file=sys.stderr)
            continue

        tracker.increment("attempts")
        print(format_outcome(outcome))
        state = session.state

    tracker.log_value("win", int(state.win))
    return state
