from colorama import Back, Fore, Style

from yorkle.consts import LetterResult
from yorkle.state import GuessOutcome

LETTER_STYLES = {
    LetterResult.IN_PLACE: Back.GREEN + Fore.BLACK,
    LetterResult.WRONG_PLACE: Back.BLACK + Fore.YELLOW,
    LetterResult.INCORRECT: Back.BLACK + Fore.WHITE,
}


def format_letter(letter: str, result: LetterResult) -> str:
    return f"{LETTER_STYLES[result]}{letter}{Style.RESET_ALL}"


def format_outcome(outcome: GuessOutcome) -> str:
    letters = [format_letter(letter, result) for letter, result in zip(outcome.guess, outcome.results)]
    return "Result: " + "".join(letters)
