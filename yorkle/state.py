from dataclasses import dataclass, field

from yorkle.consts import MAX_NUM_ATTEMPTS, LetterResult


@dataclass(frozen=True)
class GuessOutcome:
    guess: str
    results: tuple[LetterResult, ...]

    @property
    def win(self) -> bool:
        return all(result == LetterResult.IN_PLACE for result in self.results)


@dataclass
class GameState:
    outcomes: list[GuessOutcome] = field(default_factory=list)

    @property
    def num_attempts(self) -> int:
        return len(self.outcomes)

    @property
    def win(self) -> bool:
        return bool(self.outcomes) and self.outcomes[-1].win

    @property
    def terminal(self) -> bool:
        return self.num_attempts == MAX_NUM_ATTEMPTS or self.win

    @property
    def attempts_used(self) -> int:
        # A lost game is reported as one attempt past the limit.
        return self.num_attempts if self.win else MAX_NUM_ATTEMPTS + 1
