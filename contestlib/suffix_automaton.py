"""Suffix automaton (DAWG) of a string."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class AutomatonState:
    """A state: longest length, suffix link, clone flag and transitions."""

    length: int = 0
    link: int = -1
    is_clone: bool = False
    next: dict[str, int] = field(default_factory=dict)


class SuffixAutomaton:
    """Suffix automaton built online; state 0 is the initial state."""

    def __init__(self, text: str) -> None:
        self.states = [AutomatonState()]
        self.last = 0
        for ch in text:
            self.extend(ch)

    def extend(self, ch: str) -> int:
        """Append one character and return the new state."""
        if len(ch) != 1:
            raise ValueError("extend takes exactly one character")
        states = self.states
        cur = len(states)
        states.append(AutomatonState(states[self.last].length + 1))
        p = self.last
        while p != -1 and ch not in states[p].next:
            states[p].next[ch] = cur
            p = states[p].link
        if p == -1:
            states[cur].link = 0
        else:
            q = states[p].next[ch]
            if states[p].length + 1 == states[q].length:
                states[cur].link = q
            else:
                clone = len(states)
                states.append(
                    AutomatonState(states[p].length + 1, states[q].link, True, dict(states[q].next))
                )
                while p != -1 and states[p].next.get(ch) == q:
                    states[p].next[ch] = clone
                    p = states[p].link
                states[q].link = clone
                states[cur].link = clone
        self.last = cur
        return cur

    def endpos_sizes(self) -> list[int]:
        """Return, for every state, the number of end positions of its strings."""
        states = self.states
        order = sorted(range(len(states)), key=lambda i: states[i].length)
        sizes = [0 if state.is_clone else 1 for state in states]
        for u in reversed(order):
            if u != 0:
                sizes[states[u].link] += sizes[u]
        return sizes