from argparse import ArgumentParser
import string

from yorkle.consts import MAX_VALID_WORDS, WORD_SIZE
from yorkle.vocab import load_words


def filter_words(words: list[str], max_words: int) -> list[str]:
    """Keeps unique lowercase WORD_SIZE-letter words in their original order."""
    seen = set()
    kept = []
    for word in words:
        if len(word) != WORD_SIZE or set(word) - set(string.ascii_lowercase) or word in seen:
            continue

        seen.add(word)
        kept.append(word)
        if len(kept) == max_words:
            break

    return kept


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(description="Build a guess list from a raw word list")
    parser.add_argument("--input_path", type=str, required=True, help="Raw whitespace-separated word list")
    parser.add_argument("--output_path", type=str, required=True, help="Where to save the new word list")
    parser.add_argument("--max_words", type=int, default=MAX_VALID_WORDS, help="Maximum number of words to keep")
    args = parser.parse_args(argv)

    words = filter_words(load_words(args.input_path), args.max_words)
    with open(args.output_path, "w") as f:
        for word in words:
            f.write(word + "\n")

    print(f"Wrote {len(words)} words to {args.output_path}")


if __name__ == "__main__":
    main()
