import pytest

from contestlib.trie import Trie


def test_insert_and_contains():
    trie = Trie()
    words = {"car": 1, "cart": 2, "dog": 3}
    for w, v in words.items():
        trie.insert(w, v)
    for w, v in words.items():
        assert trie.contains(w, v)
        assert not trie.contains(w, v + 10)


def test_missing_path():
    trie = Trie()
    trie.insert("car", 1)
    assert not trie.contains("cat", 1)
    assert not trie.contains("cars", 1)


def test_shared_prefixes_share_nodes():
    trie = Trie()
    trie.insert("abc", 1)
    size = len(trie)
    trie.insert("ab", 2)
    assert len(trie) == size
    assert trie.contains("ab", 2)
    assert trie.contains("abc", 1)


def test_overwrite_value():
    trie = Trie()
    trie.insert("x", 1)
    trie.insert("x", 5)
    assert trie.contains("x", 5)
    assert not trie.contains("x", 1)


def test_custom_alphabet():
    trie = Trie(sigma_size=10, base="0")
    trie.insert("0429", 8)
    assert trie.contains("0429", 8)
    with pytest.raises(ValueError):
        trie.insert("a", 1)


def test_invalid_character():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.contains("A", 0)