from argparse import ArgumentParser

from yorkle.config import load_config
from yorkle.stats import StatsStore


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(description="Print the saved player stats")
    parser.add_argument("--config_path", type=str, default=None, help="JSON file with a GameConfig")
    parser.add_argument("--stats_path", type=str, default=None, help="Where the player stats are kept")
    args = parser.parse_args(argv)

    config = load_config(args.config_path, stats_path=args.stats_path)
    store = StatsStore(config.stats_path)
    print(store.render(store.load()))


if __name__ == "__main__":
    main()
