import pytest

from rootwords.model.dictionary import WordDictionary, find_subset_words, read_word_list


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Star\n  rat \n\nTSAR\nart\nstar\n", encoding="utf-8")
    return path


def test_read_word_list_normalises(word_file):
    assert read_word_list(word_file) == ("star", "rat", "tsar", "art")


def test_unloaded_dictionary_rejects_everything():
    dictionary = WordDictionary()
    assert not dictionary.loaded
    assert not dictionary.is_valid_word("star")


def test_lookup_is_case_insensitive(word_file):
    dictionary = WordDictionary()
    dictionary.load(word_file)
    assert dictionary.loaded
    assert len(dictionary) == 4
    assert dictionary.is_valid_word("STAR")
    assert dictionary.is_valid_word("Rat")
    assert "tsar" in dictionary
    assert not dictionary.is_valid_word("stars")


def test_only_first_load_counts(word_file, tmp_path):
    other = tmp_path / "other.txt"
    other.write_text("zebra\n", encoding="utf-8")

    dictionary = WordDictionary()
    dictionary.load(word_file)
    dictionary.load(other)
    dictionary.install(["giraffe"])
    assert not dictionary.is_valid_word("zebra")
    assert not dictionary.is_valid_word("giraffe")


def test_missing_file_raises_and_stays_unloaded(tmp_path):
    dictionary = WordDictionary()
    with pytest.raises(OSError):
        dictionary.load(tmp_path / "missing.txt")
    assert not dictionary.loaded


def test_find_subset_words():
    words = ["star", "tsar", "stars", "rats", "stair", "art", "trash"]
    assert find_subset_words(words, "STAR") == ["star", "tsar", "stars", "rats"]
    assert find_subset_words(words, "star", min_length=3) == ["star", "tsar", "stars", "rats", "art"]
    assert find_subset_words(words, "") == []


def test_dictionary_subset_search_keeps_word_list_order(word_file):
    dictionary = WordDictionary(["tsar", "rats", "Star", "tsar"])
    assert dictionary.find_subset_words("rats") == ["tsar", "rats", "star"]

    loaded = WordDictionary()
    loaded.load(word_file)
    assert loaded.find_subset_words("star", min_length=3) == ["star", "rat", "tsar", "art"]
