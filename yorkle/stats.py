import copy
from dataclasses import dataclass, field

import more_itertools

from yorkle.consts import MAX_NUM_ATTEMPTS, STATS_FILENAME


@dataclass
class PlayerStats:
    wins_per_num_attempts: list[int] = field(default_factory=lambda: [0] * MAX_NUM_ATTEMPTS)
    num_missed_words: int = 0

    @property
    def num_wins(self) -> int:
        return sum(self.wins_per_num_attempts)

    @property
    def num_games(self) -> int:
        return self.num_wins + self.num_missed_words

    @property
    def win_rate(self) -> float:
        if self.num_games == 0:
            return 0.0
        return 100 * self.num_wins / self.num_games


def parse_stats(text: str) -> PlayerStats:
    """Best-effort parse of the stats record.

    Reading stops at the first token that is not a non-negative integer, every field
    after that point is zero.
    """
    values = []
    for token in text.split()[:MAX_NUM_ATTEMPTS + 1]:
        if not (token.isascii() and token.isdigit()):
            break
        values.append(int(token))

    values = list(more_itertools.padded(values, fillvalue=0, n=MAX_NUM_ATTEMPTS + 1))
    return PlayerStats(wins_per_num_attempts=values[:MAX_NUM_ATTEMPTS], num_missed_words=values[MAX_NUM_ATTEMPTS])


def serialize_stats(stats: PlayerStats) -> str:
    return " ".join(str(value) for value in stats.wins_per_num_attempts + [stats.num_missed_words]) + "\n"


def record_outcome(stats: PlayerStats, attempts_used: int) -> PlayerStats:
    assert attempts_used > 0
    stats = copy.deepcopy(stats)
    if attempts_used > MAX_NUM_ATTEMPTS:
        stats.num_missed_words += 1
    else:
        stats.wins_per_num_attempts[attempts_used - 1] += 1
    return stats


def format_stats(stats: PlayerStats) -> str:
    lines = [
        f"Played: {stats.num_games}",
        f"Win %: {stats.win_rate:.1f}%",
        "",
        "Guess distribution:",
    ]
    for num_attempts, wins in enumerate(stats.wins_per_num_attempts, start=1):
        bar = "*" * wins + " " if wins else ""
        lines.append(f"{num_attempts}: {bar}{wins}")
    return "\n".join(lines)


class StatsStore:
    def __init__(self, path: str = STATS_FILENAME) -> None:
        self.path = path

    def load(self) -> PlayerStats:
        try:
            with open(self.path, "r", errors="replace") as f:
                text = f.read()
        except OSError:
            return PlayerStats()
        return parse_stats(text)

    def persist(self, stats: PlayerStats) -> bool:
        try:
            with open(self.path, "w") as f:
                f.write(serialize_stats(stats))
        except OSError:
            return False
        return True

    def record_outcome(self, stats: PlayerStats, attempts_used: int) -> PlayerStats:
        return record_outcome(stats, attempts_used)

    def render(self, stats: PlayerStats) -> str:
        return format_stats(stats)
