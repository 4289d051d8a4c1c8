import pytest

from contestlib.aho_corasick import AhoCorasick

PATTERNS = {"he": 1, "she": 2, "his": 3, "hers": 4}


def _automaton(patterns=PATTERNS, **kwargs):
    ac = AhoCorasick(**kwargs)
    for word, value in patterns.items():
        ac.insert(word, value)
    ac.build_failure_links()
    return ac


def _occurrences(text, patterns):
    return {
        (i + len(w) - 1, v)
        for i in range(len(text))
        for w, v in patterns.items()
        if text.startswith(w, i)
    }


def test_classic_example_order():
    assert _automaton().find("ushers") == [(3, 2), (3, 1), (5, 4)]


@pytest.mark.parametrize("text", ["ushers", "hishershe", "shehishers", "xyz", ""])
def test_matches_every_occurrence(text):
    found = _automaton().find(text)
    assert len(found) == len(set(found))
    assert set(found) == _occurrences(text, PATTERNS)


def test_reported_matches_end_where_stated():
    text = "ahishershesh"
    by_value = {v: w for w, v in PATTERNS.items()}
    for end, value in _automaton().find(text):
        word = by_value[value]
        assert text[end - len(word) + 1:end + 1] == word


def test_contains():
    ac = _automaton()
    assert ac.contains("hers", 4)
    assert not ac.contains("hers", 3)
    assert not ac.contains("herb", 4)


def test_insert_after_build_is_seen_by_find():
    ac = _automaton()
    ac.insert("us", 7)
    assert set(ac.find("ushers")) == _occurrences("ushers", {**PATTERNS, "us": 7})


def test_other_alphabet():
    patterns = {"01": 1, "1": 2, "11": 3}
    ac = _automaton(patterns, sigma_size=2, base="0")
    text = "0110101"
    assert set(ac.find(text)) == _occurrences(text, patterns)


def test_character_outside_alphabet():
    ac = AhoCorasick()
    with pytest.raises(ValueError):
        ac.insert("aBc", 1)
    with pytest.raises(ValueError):
        _automaton().find("she!")