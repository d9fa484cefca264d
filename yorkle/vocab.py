from typing import Iterable

import more_itertools

from yorkle.consts import MAX_VALID_WORDS, WORD_SIZE


class SourceUnavailableError(Exception):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not load '{path}': {reason}")
        self.path = path
        self.reason = reason


def read_tokens(path: str) -> list[str]:
    try:
        with open(path, "r") as f:
            return f.read().split()
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e


def load_words(path: str) -> list[str]:
    return read_tokens(path)


def load_answer(path: str) -> str:
    tokens = read_tokens(path)
    if not tokens:
        raise SourceUnavailableError(path, "no answer found")

    answer = tokens[0]
    if len(answer) != WORD_SIZE:
        raise SourceUnavailableError(path, f"answer '{answer}' is not {WORD_SIZE} letters long")
    return answer


class WordCatalog:
    """Fixed-capacity set of guessable words.

    Words are stored exactly as supplied. Anything past `max_words` entries is dropped.
    """

    def __init__(self, words: Iterable[str], max_words: int = MAX_VALID_WORDS) -> None:
        assert max_words > 0, "Catalog capacity must be positive"
        self.capacity = max_words
        self.words = tuple(more_itertools.take(max_words, words))
        self.lookup = frozenset(self.words)

    @classmethod
    def from_file(cls, path: str, max_words: int = MAX_VALID_WORDS) -> "WordCatalog":
        return cls(load_words(path), max_words=max_words)

    def contains(self, word: str) -> bool:
        return word in self.lookup

    def __contains__(self, word: object) -> bool:
        return word in self.lookup

    def __len__(self) -> int:
        return len(self.words)
