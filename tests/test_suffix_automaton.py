import pytest

from contestlib.suffix_automaton import SuffixAutomaton

TEXTS = ["a", "abcbc", "aaaa", "abcbcab", "mississippi"]


def _substrings(text):
    return {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}


def _walk(sam, word):
    state = 0
    for ch in word:
        state = sam.states[state].next.get(ch)
        if state is None:
            return None
    return state


@pytest.mark.parametrize("text", TEXTS)
def test_distinct_substring_count(text):
    sam = SuffixAutomaton(text)
    total = sum(s.length - sam.states[s.link].length for s in sam.states[1:])
    assert total == len(_substrings(text))


@pytest.mark.parametrize("text", TEXTS)
def test_state_count_bound(text):
    sam = SuffixAutomaton(text)
    assert len(sam.states) <= max(2 * len(text) - 1, 2)


@pytest.mark.parametrize("text", TEXTS)
def test_accepts_exactly_substrings(text):
    sam = SuffixAutomaton(text)
    for word in _substrings(text):
        assert _walk(sam, word) is not None
    assert _walk(sam, text + "z") is None


@pytest.mark.parametrize("text", TEXTS)
def test_endpos_sizes_count_occurrences(text):
    sam = SuffixAutomaton(text)
    sizes = sam.endpos_sizes()
    for word in _substrings(text):
        occurrences = sum(text.startswith(word, i) for i in range(len(text)))
        assert sizes[_walk(sam, word)] == occurrences


def test_incremental_extend_matches_bulk_build():
    sam = SuffixAutomaton("abc")
    sam.extend("b")
    sam.extend("c")
    bulk = SuffixAutomaton("abcbc")
    assert [s.length for s in sam.states] == [s.length for s in bulk.states]
    assert sam.endpos_sizes() == bulk.endpos_sizes()


def test_extend_rejects_multiple_characters():
    with pytest.raises(ValueError):
        SuffixAutomaton("").extend("ab")