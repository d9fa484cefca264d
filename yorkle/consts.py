import enum

WORD_SIZE = 5
MAX_NUM_ATTEMPTS = 6
# Default catalog capacity, extra words in the source are ignored.
MAX_VALID_WORDS = 15_000

WORD_LIST_FILENAME = "words.txt"
TODAYS_ANSWER_FILENAME = "answer.txt"
STATS_FILENAME = "stats.txt"


class LetterResult(enum.IntEnum):
    INCORRECT = 0
    WRONG_PLACE = 1
    IN_PLACE = 2
