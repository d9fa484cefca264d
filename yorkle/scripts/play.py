from argparse import ArgumentParser
import json
import sys

import colorama

from yorkle.config import load_config
from yorkle.session import AttemptReader, GameSession, play
from yorkle.stats import StatsStore
from yorkle.tracker import Tracker
from yorkle.vocab import SourceUnavailableError, WordCatalog, load_answer


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(description="Guess today's five-letter word")
    parser.add_argument("--config_path", type=str, default=None, help="JSON file with a GameConfig")
    parser.add_argument("--words_path", type=str, default=None, help="File containing the list of valid guesses")
    parser.add_argument("--answer_path", type=str, default=None, help="File containing today's answer")
    parser.add_argument("--stats_path", type=str, default=None, help="Where the player stats are kept")
    parser.add_argument("--max_valid_words", type=int, default=None, help="Maximum number of words to load")
    parser.add_argument("--report", action="store_true", default=False, help="Print session metrics as JSON")
    args = parser.parse_args(argv)

    config = load_config(
        args.config_path,
        words_path=args.words_path,
        answer_path=args.answer_path,
        stats_path=args.stats_path,
        max_valid_words=args.max_valid_words,
    )
    colorama.just_fix_windows_console()

    try:
        catalog = WordCatalog.from_file(config.words_path, max_words=config.max_valid_words)
        answer = load_answer(config.answer_path)
    except SourceUnavailableError as e:
        print(e, file=sys.stderr)
        return 1

    store = StatsStore(config.stats_path)
    stats = store.load()

    tracker = Tracker()
    session = GameSession(catalog, answer)
    state = play(session, AttemptReader(sys.stdin), tracker)
    if state is None:
        print("\nInput ended before the game was finished, stats were not updated.", file=sys.stderr)
        return 1

    if state.win:
        print(f"You guessed the word in {state.num_attempts} attempt{'s' if state.num_attempts != 1 else ''}!")
    else:
        print(f"Out of attempts! The word was '{answer}'.")

    stats = store.record_outcome(stats, state.attempts_used)
    if not store.persist(stats):
        print(f"Warning: could not save stats to {config.stats_path}.", file=sys.stderr)

    print()
    print(store.render(stats))

    if args.report:
        print(json.dumps(tracker.report(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
