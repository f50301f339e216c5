import pytest

from passgen import wordlist
from passgen.errors import CatalogLoadError


@pytest.fixture(autouse=True)
def clear_cache():
    wordlist.load_wordlist.cache_clear()  # clear lru_cache
    yield
    wordlist.load_wordlist.cache_clear()


def test_bundled_wordlist():
    words = wordlist.load_wordlist()
    for word in words:
        assert isinstance(word, str)
        assert 3 <= len(word) <= 14
        assert word == word.strip()
    assert len(set(words)) == len(words), "no duplicate words"
    assert len(words) > 1000, "enough words for password generator"


def test_bundled_short_wordlist():
    words, short_words = wordlist.load_catalogs()
    assert short_words
    assert all(1 <= len(w) <= 2 for w in short_words)
    assert not set(words) & set(short_words)


def test_custom_wordlist(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("  apple\n\nbanana  \n\t\ncherry\n", encoding='utf-8')
    assert wordlist.load_wordlist(path) == ("apple", "banana", "cherry")
    words, short_words = wordlist.load_catalogs(wordlist=str(path))
    assert words == ("apple", "banana", "cherry")
    assert short_words == wordlist.load_wordlist(wordlist.SHORT_WORDLIST_PATH)


def test_empty_wordlist(tmp_path):
    path = tmp_path / 'empty.txt'
    path.write_text("\n   \n", encoding='utf-8')
    with pytest.raises(CatalogLoadError) as exc_info:
        wordlist.load_wordlist(path)
    assert exc_info.value.path == path
    assert "no words found" in str(exc_info.value)


def test_missing_wordlist(tmp_path):
    path = tmp_path / 'does' / 'not' / 'exist'
    with pytest.raises(CatalogLoadError) as exc_info:
        wordlist.load_catalogs(short_wordlist=path)
    assert isinstance(exc_info.value.reason, FileNotFoundError)


def test_word_stats():
    stats = wordlist.word_stats(("ox", "cat", "dog", "blue", "elephant"))
    assert stats.count == 5
    assert stats.shortest == "ox"
    assert stats.longest == "elephant"
    assert stats.by_length == ((8, 1), (4, 1), (3, 2), (2, 1))
    with pytest.raises(ValueError):
        wordlist.word_stats(())
