from pydantic import BaseModel, Field

from yorkle.consts import MAX_VALID_WORDS, STATS_FILENAME, TODAYS_ANSWER_FILENAME, WORD_LIST_FILENAME


class GameConfig(BaseModel):
    words_path: str = WORD_LIST_FILENAME
    answer_path: str = TODAYS_ANSWER_FILENAME
    stats_path: str = STATS_FILENAME
    max_valid_words: int = Field(default=MAX_VALID_WORDS, gt=0)


def load_config(path: str | None, **overrides: object) -> GameConfig:
    """Reads a JSON config if given, then applies the non-None overrides on top."""
    if path is not None:
        with open(path, "r") as f:
            config = GameConfig.model_validate_json(f.read())
    else:
        config = GameConfig()

    updates = {key: value for key, value in overrides.items() if value is not None}
    return GameConfig.model_validate(config.model_dump() | updates)
