"""
Justification symbols and prefix unification.

A justification symbol names the witness an ionic formula depends on.
Two kinds exist:
    concrete:  label > 0, a fresh id handed out once ("j1", "j2", ...)
    variable:  label == 0, stands for every instance of its rank ("J")

Unification is deliberately weak: two symbols unify iff they have the
same rank and at least one of them is a variable. Two distinct concrete
symbols never unify, so existential witnesses can never collide.

Prefixes are tuples of symbols, outermost first.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class JustificationSymbol:
    """A ranked justification label. label 0 marks a unification variable."""
    rank: int
    label: int = 0

    @property
    def is_variable(self) -> bool:
        return self.label == 0

    def unifies(self, other: 'JustificationSymbol') -> bool:
        if self.rank != other.rank:
            return False
        return self.is_variable or other.is_variable

    def to_dict(self):
        return {"rank": self.rank, "label": self.label}

    def __str__(self):
        if self.is_variable:
            return "J"
        return f"j{self.label}"


class SymbolCounter:
    """
    Source of concrete symbol ids for one search.

    Ids start at 1 and only ever grow, so no two existential witnesses
    created during the same search share a label.
    """

    def __init__(self, start: int = 1):
        self._next = start

    @property
    def issued(self) -> int:
        """How many concrete symbols have been handed out so far."""
        return self._next - 1

    def fresh(self, rank: int) -> JustificationSymbol:
        symbol = JustificationSymbol(rank, self._next)
        self._next += 1
        return symbol

    def variable(self, rank: int) -> JustificationSymbol:
        return JustificationSymbol(rank, 0)


def prefixes_unify(p1: tuple, p2: tuple) -> bool:
    """Equal length and pairwise unifiable."""
    if len(p1) != len(p2):
        return False
    return all(a.unifies(b) for a, b in zip(p1, p2))


def extends_prefix(longer: tuple, shorter: tuple) -> bool:
    """
    Does `longer` start with (a unifiable copy of) `shorter`?

    Prefixes render innermost-last, so on paper this reads as `shorter`
    being a suffix of `longer`. The empty prefix is extended by everything.
    """
    if len(shorter) > len(longer):
        return False
    return all(a.unifies(b) for a, b in zip(shorter, longer))
