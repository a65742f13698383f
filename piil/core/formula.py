"""
Signed, ranked formulas of partial information ionic logic.

A Formula is a small tree:
    atomic:   a propositional variable ("a", "rain", "False")
    unary:    one child under -, ~, ~' or bot
    binary:   two children under &, |, ->, ! or one of the ions

Every node also carries the epistemic bookkeeping the tableau needs:

    sign        one of four turnstiles (T, NT, PT, NPT), UNKNOWN until signed
    knowledge   HARD (premise), SOFT (defeasible), JUST (justification)
    quantifier  NONE, UNIVERSAL, EXISTENTIAL, or GENJUST (generic template)
    prefix      tuple of JustificationSymbols, outermost first
    rank        ion nesting depth: ion(f, g) -> max(1 + rank f, rank g)
    expanded    has a tableau rule been applied to this node on this branch

The signs are not booleans. Their bit encoding makes the main closure
test a one-liner: two signs contradict when they differ exactly in bit 1
(T/NT, PT/NPT), plus the strong pair T/NPT.

Formulas are never edited structurally once built. The engine only
touches `expanded` (and snapshots/restores it around splits); everything
else is produced fresh through derive().
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

from .justification import prefixes_unify


class Sign(IntEnum):
    TRUE = 0
    NOT_TRUE = 2
    POT_TRUE = 4
    NOT_POT_TRUE = 6
    UNKNOWN = 127

    @property
    def short(self) -> str:
        return _SIGN_SHORT[self]


_SIGN_SHORT = {
    Sign.TRUE: "T", Sign.NOT_TRUE: "NT",
    Sign.POT_TRUE: "PT", Sign.NOT_POT_TRUE: "NPT",
    Sign.UNKNOWN: "?",
}


class Knowledge(Enum):
    HARD = "hard"
    SOFT = "soft"
    JUST = "just"
    UNKNOWN = "unknown"


class Quantifier(Enum):
    NONE = "none"
    UNIVERSAL = "universal"
    EXISTENTIAL = "existential"
    GENJUST = "genjust"    # generic justification template, never expanded


class Connective(Enum):
    NEGATION = "-"
    STRONG_NEGATION = "~"
    WEAK_NEGATION = "~'"
    BOT = "bot"
    AND = "&"
    OR = "|"
    IMPLIES = "->"
    BANG = "!"
    GENERIC_ION = "*"
    ION_0 = "*0"
    ION_1 = "*1"
    ION_2 = "*2"
    ION_3 = "*3"
    ION_4 = "*4"
    ION_5 = "*5"
    ION_6 = "*6"
    ION_7 = "*7"
    ION_8 = "*8"

    @property
    def is_unary(self) -> bool:
        return self in UNARY_CONNECTIVES

    @property
    def is_ion(self) -> bool:
        return self.value.startswith("*")

    @property
    def ion_index(self) -> Optional[int]:
        """Digit of a numbered ion, None for everything else."""
        if self.is_ion and len(self.value) == 2:
            return int(self.value[1])
        return None

    @classmethod
    def ion(cls, digit: int) -> 'Connective':
        return cls(f"*{digit}")


UNARY_CONNECTIVES = frozenset({
    Connective.NEGATION, Connective.STRONG_NEGATION,
    Connective.WEAK_NEGATION, Connective.BOT,
})

T = Sign.TRUE
NT = Sign.NOT_TRUE
PT = Sign.POT_TRUE
NPT = Sign.NOT_POT_TRUE


def contradicts(s1: Sign, s2: Sign) -> bool:
    """T/NT, PT/NPT (bit 1 differs) or the strong pair T/NPT, either order."""
    if s1 == Sign.UNKNOWN or s2 == Sign.UNKNOWN:
        return False
    return (s1 ^ s2) == 2 or {s1, s2} == {T, NPT}


def is_positive(sign: Sign) -> bool:
    return sign in (T, PT)


# ── Rendering tables ─────────────────────────────────────────────────────────

ION_GLYPHS = ["♢", "♡", "♠", "O", "♣", "•", "∆", "∇", "⋈"]

TURNSTILES = {T: "⊨", NT: "⊭", PT: "⊫", NPT: "⊯"}
SOFT_TURNSTILES = {T: "⊨₅", NT: "⊭₅", PT: "⊫₅", NPT: "⊯₅"}

QUANTIFIER_SUFFIX = {Quantifier.UNIVERSAL: "∀", Quantifier.EXISTENTIAL: "∃"}


@dataclass(eq=False)
class Formula:
    connective: Optional[Connective] = None
    name: Optional[str] = None
    children: tuple = ()
    sign: Sign = Sign.UNKNOWN
    knowledge: Knowledge = Knowledge.UNKNOWN
    quantifier: Quantifier = Quantifier.NONE
    prefix: tuple = ()
    rank: int = 0
    expanded: bool = field(default=False, repr=False)

    # ── Construction ─────────────────────────────────────────────────────────

    @classmethod
    def atom(cls, name: str) -> 'Formula':
        return cls(name=name)

    @classmethod
    def unary(cls, connective: Connective, child: 'Formula') -> 'Formula':
        assert connective.is_unary, f"{connective} is not unary"
        return cls(connective=connective, children=(child,), rank=child.rank)

    @classmethod
    def binary(cls, connective: Connective, left: 'Formula', right: 'Formula') -> 'Formula':
        assert not connective.is_unary, f"{connective} is not binary"
        if connective.is_ion:
            rank = max(1 + left.rank, right.rank)
        else:
            rank = max(left.rank, right.rank)
        return cls(connective=connective, children=(left, right), rank=rank)

    def copy(self) -> 'Formula':
        """Fully independent deep copy, expansion flag included."""
        return Formula(
            connective=self.connective,
            name=self.name,
            children=tuple(c.copy() for c in self.children),
            sign=self.sign,
            knowledge=self.knowledge,
            quantifier=self.quantifier,
            prefix=tuple(self.prefix),
            rank=self.rank,
            expanded=self.expanded,
        )

    def derive(self, sign: Sign, knowledge: Knowledge,
               quantifier: Optional[Quantifier] = None,
               prefix: Optional[tuple] = None) -> 'Formula':
        """
        A re-signed copy of this node for use on a tableau branch.

        The prefix is replaced, never appended to; omitted means empty.
        The quantifier is kept unless a new one is given. The result is
        always unexpanded. Children are shared: they are never mutated.
        """
        return Formula(
            connective=self.connective,
            name=self.name,
            children=self.children,
            sign=sign,
            knowledge=knowledge,
            quantifier=self.quantifier if quantifier is None else quantifier,
            prefix=tuple(prefix) if prefix else (),
            rank=self.rank,
        )

    def signed(self, sign: Sign, knowledge: Knowledge = Knowledge.HARD) -> 'Formula':
        """Sign a freshly parsed sentence in place and return it."""
        self.sign = sign
        self.knowledge = knowledge
        return self

    # ── Shape queries ────────────────────────────────────────────────────────

    @property
    def is_atomic(self) -> bool:
        return self.connective is None

    @property
    def is_binary(self) -> bool:
        return len(self.children) == 2

    def child(self, i: int) -> 'Formula':
        return self.children[i]

    def is_named(self, name: str) -> bool:
        """Case-insensitive variable name test; False for compounds."""
        return self.is_atomic and self.name.lower() == name.lower()

    @property
    def is_constant(self) -> bool:
        """The two reserved atoms True and False."""
        return self.is_named("True") or self.is_named("False")

    # ── Equality ─────────────────────────────────────────────────────────────

    def same_shape(self, other: 'Formula') -> bool:
        """Structural equality ignoring sign, knowledge and prefix."""
        if self.rank != other.rank or self.connective != other.connective:
            return False
        if self.is_atomic:
            return self.name.lower() == other.name.lower()
        return all(a.same_shape(b) for a, b in zip(self.children, other.children))

    def signed_equal(self, other: 'Formula') -> bool:
        """Structural equality that also requires equal signs at every node."""
        if self.sign != other.sign or self.connective != other.connective:
            return False
        if self.is_atomic:
            return self.name.lower() == other.name.lower()
        return all(a.signed_equal(b) for a, b in zip(self.children, other.children))

    def matches(self, other: 'Formula') -> bool:
        """
        Full structural equality: same sign, knowledge and unifiable
        prefix at the top, then same shape all the way down.
        """
        if self.sign != other.sign or self.knowledge != other.knowledge:
            return False
        if self.connective != other.connective:
            return False
        if not prefixes_unify(self.prefix, other.prefix):
            return False
        if self.is_atomic:
            return self.name.lower() == other.name.lower()
        return all(a.matches(b) for a, b in zip(self.children, other.children))

    # ── Rendering ────────────────────────────────────────────────────────────

    def body(self) -> str:
        """The formula text without prefix or turnstile."""
        if self.is_atomic:
            return self.name
        c = self.connective
        if c.is_unary:
            inner = self.children[0]
            if c == Connective.BOT:
                return f"bot({inner})"
            return f"{c.value}({inner})"
        left, right = self.children
        if c.ion_index is not None:
            return f"{ION_GLYPHS[c.ion_index]}({left}, {right})"
        if c == Connective.GENERIC_ION:
            return f"*({left}, {right})"
        return f"({left} {c.value} {right})"

    def render(self) -> str:
        s = ""
        if self.prefix:
            s += "".join(str(j) for j in reversed(self.prefix)) + " "
        if self.knowledge in (Knowledge.HARD, Knowledge.JUST) and self.sign in TURNSTILES:
            s += TURNSTILES[self.sign] + " "
        elif self.knowledge == Knowledge.SOFT and self.sign in SOFT_TURNSTILES:
            s += SOFT_TURNSTILES[self.sign] + " "
        s += self.body()
        s += QUANTIFIER_SUFFIX.get(self.quantifier, "")
        return s

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Formula({self.render()!r})"

    def to_dict(self):
        return {
            "text": self.render(),
            "body": self.body(),
            "sign": self.sign.short,
            "knowledge": self.knowledge.value,
            "quantifier": self.quantifier.value,
            "prefix": [j.to_dict() for j in self.prefix],
            "rank": self.rank,
        }
