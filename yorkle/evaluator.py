from yorkle.consts import WORD_SIZE, LetterResult
from yorkle.state import GuessOutcome


def compute_result(answer: str, guess: str) -> list[LetterResult]:
    assert len(answer) == len(guess) == WORD_SIZE
    result = []
    consumed = []
    for answer_letter, guessed_letter in zip(answer, guess):
        if answer_letter == guessed_letter:
            result.append(LetterResult.IN_PLACE)
            consumed.append(True)
        else:
            result.append(LetterResult.INCORRECT)
            consumed.append(False)

    for guess_idx, guessed_letter in enumerate(guess):
        if result[guess_idx] == LetterResult.IN_PLACE:
            continue

        for answer_idx, answer_letter in enumerate(answer):
            if not consumed[answer_idx] and answer_letter == guessed_letter:
                result[guess_idx] = LetterResult.WRONG_PLACE
                consumed[answer_idx] = True
                break

    return result


def evaluate(answer: str, guess: str) -> GuessOutcome:
    return GuessOutcome(guess=guess, results=tuple(compute_result(answer, guess)))
