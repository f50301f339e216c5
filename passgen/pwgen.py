# pwgen
# (random passphrase generator)
#

import time
import logging
from typing import NamedTuple

from .entropy import secure_random
from .errors import InvalidWordCount, LengthOutOfRange, NoCombinationFound

log = logging.getLogger(__name__)

NUM_WORDS = 4
SEPARATOR = '-'

# Symbols to pick from when adding a non-word symbol
SYMBOLS = '!@#$%^&*()-_+=~`|\\/?><.,'

# Length-constrained search: give up after this many seconds
TIME_BUDGET_SECS = 1.0
# Length-constrained search: random draws before abandoning an attempt
MAX_DRAWS_PER_SLOT = 100
# Slots with at most this many characters left are filled from short words
SHORT_WORD_MAX_LENGTH = 2


class GenerationRequest(NamedTuple):

    """Parameters of a generated password.

    `length` is the exact length of the joined words, including separators
    but not the appended number and symbol. Zero or negative length
    means any length.

    """

    word_count: int = NUM_WORDS
    separator: str = SEPARATOR
    length: int = 0
    capitalize: bool = False
    number: bool = False
    symbol: bool = False


def length_bounds(words, word_count: int, separator_length: int) -> tuple:
    """Shortest and longest password that can be built from `words`.

    :returns: (min_length, max_length)

    """
    shortest = min(len(w) for w in words)
    longest = max(len(w) for w in words)
    separators = (word_count - 1) * separator_length
    return word_count * shortest + separators, word_count * longest + separators


def check_length(words, word_count: int, separator_length: int, target_length: int):
    """Raise LengthOutOfRange if `target_length` is not achievable."""
    min_length, max_length = length_bounds(words, word_count, separator_length)
    if not min_length <= target_length <= max_length:
        raise LengthOutOfRange(target_length, word_count, min_length, max_length)


def select_words(words, count: int, rng=None) -> list:
    """Choose `count` random words, independently of each other."""
    rng = rng or secure_random
    return [rng.choice(words) for _ in range(count)]


def _draw_word(words, max_length: int, rng):
    for _ in range(MAX_DRAWS_PER_SLOT):
        candidate = rng.choice(words)
        if len(candidate) <= max_length:
            return candidate
    return None


def _compose_attempt(words, short_words, word_count, separator_length, target_length, rng):
    picked = []
    remaining = target_length
    for i in range(word_count):
        # Leave room for separators of the following words
        max_word_length = remaining - (word_count - i - 1) * separator_length
        if max_word_length <= 0:
            return None
        if max_word_length <= SHORT_WORD_MAX_LENGTH:
            word = _draw_word(short_words, max_word_length, rng)
        else:
            word = _draw_word(words, max_word_length, rng)
        if word is None:
            return None
        picked.append(word)
        remaining -= len(word)
        if i < word_count - 1:
            remaining -= separator_length
    if remaining != 0:
        return None
    return picked


def compose_for_length(words, short_words,
                       word_count: int,
                       separator_length: int,
                       target_length: int,
                       rng=None) -> list:
    """Choose random words which, joined by separator, give exactly `target_length`.

    The words are picked one by one, each no longer than the space left for it.
    Slots with very little space left are filled from `short_words`.
    When the words don't add up to the target length, the attempt is thrown away
    and a new one is started, until :data:`TIME_BUDGET_SECS` runs out.

    :param words: General word list
    :param short_words: Words of one or two characters
    :param word_count: Number of words to choose
    :param separator_length: Length of separator put between the words
    :param target_length: Required length of the joined words
    :param rng: Random source (default: :data:`secure_random`)
    :returns: List of `word_count` words
    :raises LengthOutOfRange: `target_length` can't be reached with `words`
    :raises NoCombinationFound: No match within the time budget

    """
    if word_count <= 0:
        raise InvalidWordCount(word_count)
    check_length(words, word_count, separator_length, target_length)
    rng = rng or secure_random
    start_time = time.monotonic()
    attempts = 0
    while time.monotonic() - start_time < TIME_BUDGET_SECS:
        attempts += 1
        picked = _compose_attempt(words, short_words, word_count,
                                  separator_length, target_length, rng)
        if picked is not None:
            log.debug("found words for length %d after %d attempts (%.3fs)",
                      target_length, attempts, time.monotonic() - start_time)
            return picked
    log.debug("gave up on length %d after %d attempts", target_length, attempts)
    raise NoCombinationFound(target_length)


def capitalize_first(word: str) -> str:
    """Make first letter uppercase, keep the rest as is.

    Letters without single-character uppercase form (e.g. "ß") are kept.

    """
    first = word[:1].upper()
    if len(first) != 1:
        first = word[:1]
    return first + word[1:]


def decorate(words, separator: str = SEPARATOR,
             capitalize: bool = False,
             number: bool = False,
             symbol: bool = False,
             rng=None) -> str:
    """Join the words, optionally capitalized, then add a digit and a symbol."""
    rng = rng or secure_random
    if capitalize:
        words = [capitalize_first(w) for w in words]
    password = separator.join(words)
    if number:
        password += str(rng.random_in_range(0, 9))
    if symbol:
        password += rng.choice(SYMBOLS)
    return password


def generate_password(request: GenerationRequest, words, short_words, rng=None) -> str:
    """Generate XKCD-style password from dictionary words.

    :param request: Number of words, separator etc.
    :param words: General word list
    :param short_words: Word list used when composing exact length
    :param rng: Random source (default: :data:`secure_random`)
    :returns: The password.

    """
    if request.word_count <= 0:
        raise InvalidWordCount(request.word_count)
    if request.length > 0:
        picked = compose_for_length(words, short_words, request.word_count,
                                    len(request.separator), request.length, rng)
    else:
        picked = select_words(words, request.word_count, rng)
    return decorate(picked, request.separator,
                    capitalize=request.capitalize,
                    number=request.number,
                    symbol=request.symbol,
                    rng=rng)
