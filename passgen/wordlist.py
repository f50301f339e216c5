# load_wordlist, word_stats
# (word catalogs)
#

import logging
import functools
from collections import Counter
from pathlib import Path
from typing import NamedTuple

from .errors import CatalogLoadError

log = logging.getLogger(__name__)

# Word lists bundled with the package
# General words are 3 to 14 characters long, short words 1 to 2 characters.
WORDLIST_PATH = Path(__file__).parent / 'words.txt'
SHORT_WORDLIST_PATH = Path(__file__).parent / 'short-words.txt'


class WordStats(NamedTuple):
    count: int
    shortest: str
    longest: str
    by_length: tuple  # ((length, count), ...) longest first


def filter_wordlist(lines) -> tuple:
    """Strip whitespace, drop blank lines."""
    return tuple(w for w in (line.strip() for line in lines) if w)


@functools.lru_cache(maxsize=None)
def load_wordlist(path=WORDLIST_PATH) -> tuple:
    """Load and return a word list.

    :param path: Text file with one word per line
    :returns: Non-empty tuple of words, in file order
    :raises CatalogLoadError: The file can't be read or contains no words

    """
    path = Path(path).expanduser()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = filter_wordlist(f)
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(path, e) from e
    if not words:
        raise CatalogLoadError(path, "no words found in the file")
    log.debug("loaded %d words from %s", len(words), path)
    return words


def load_catalogs(wordlist=None, short_wordlist=None) -> tuple:
    """Load general and short word lists, bundled ones by default."""
    words = load_wordlist(Path(wordlist) if wordlist else WORDLIST_PATH)
    short_words = load_wordlist(Path(short_wordlist) if short_wordlist else SHORT_WORDLIST_PATH)
    return words, short_words


def word_stats(words) -> WordStats:
    if not words:
        raise ValueError("empty word list")
    lengths = Counter(len(w) for w in words)
    return WordStats(
        count=len(words),
        shortest=min(words, key=len),
        longest=max(words, key=len),
        by_length=tuple(sorted(lengths.items(), reverse=True)),
    )
