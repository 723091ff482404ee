import pytest

from algonotes.trie import Trie


def _sample():
    trie = Trie()
    for word in ["ARM", "DO", "TIME"]:
        trie.insert(word)
    return trie


def test_search_example():
    trie = _sample()
    assert trie.search("ARM") is True
    assert trie.search("ARMY") is False
    assert trie.search("TIM") is False


def test_remove_and_reinsert():
    trie = _sample()
    trie.remove("ARM")
    assert trie.search("ARM") is False
    trie.insert("ARM")
    assert trie.search("ARM") is True


def test_remove_keeps_other_words():
    trie = Trie()
    trie.insert("TIM")
    trie.insert("TIME")
    trie.remove("TIM")
    assert "TIME" in trie
    assert "TIM" not in trie


def test_remove_absent_word_is_ignored():
    trie = _sample()
    trie.remove("ZEBRA")
    assert "DO" in trie
    assert "ZEBRA" not in trie


def test_contains_non_string():
    trie = _sample()
    assert (42 in trie) is False


def test_prefix_is_not_a_word_until_inserted():
    trie = Trie()
    trie.insert("ABC")
    assert not trie.search("AB")
    trie.insert("AB")
    assert trie.search("AB")


def test_invalid_letters_rejected():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("arm")
    with pytest.raises(ValueError):
        trie.search("A1")