"""
Tableau expansion rules.

apply_rule(f) answers "what does this signed formula put on the branch?"
as a list of alternatives:

    []                  no rule (atoms, unsigned nodes, PT/NPT bot)
    [[g1, g2]]          one alternative: g1 and g2 join the same branch
    [[g1], [g2]]        two alternatives: the branch splits

Examples:
    T  a -> b   ->  [[NPT a], [T b]]
    NPT a -> b  ->  [[T a, NPT b]]
    T  -a       ->  [[NPT a]]

Successors inherit the parent's knowledge level and justification prefix.
Ions are handled in ions.py; quantified formulas pick up a justification
symbol here.
"""

from dataclasses import dataclass

from ..core.formula import (
    Formula, Sign, Quantifier, Connective,
    T, NT, PT, NPT,
)
from ..core.justification import SymbolCounter
from .ions import expand_ion, NARROW_IONS


@dataclass(frozen=True)
class Same:
    """Child `child` re-signed to `sign`; knowledge and prefix inherited."""
    child: int
    sign: Sign


def _unary(t, nt, pt, npt):
    return {T: ((Same(0, t),),), NT: ((Same(0, nt),),),
            PT: ((Same(0, pt),),), NPT: ((Same(0, npt),),)}


BOOLEAN_RULES = {
    Connective.NEGATION:        _unary(t=NPT, nt=PT, pt=NT, npt=T),
    Connective.STRONG_NEGATION: _unary(t=NT, nt=T, pt=NT, npt=T),
    Connective.WEAK_NEGATION:   _unary(t=NPT, nt=PT, pt=NPT, npt=PT),
    Connective.BOT: {
        T:   ((Same(0, PT), Same(0, NT)),),
        NT:  ((Same(0, T),), (Same(0, NPT),)),
    },
    Connective.AND: {
        T:   ((Same(0, T), Same(1, T)),),
        NT:  ((Same(0, NT),), (Same(1, NT),)),
        PT:  ((Same(0, PT), Same(1, PT)),),
        NPT: ((Same(0, NPT),), (Same(1, NPT),)),
    },
    Connective.OR: {
        T:   ((Same(0, T),), (Same(1, T),)),
        NT:  ((Same(0, NT), Same(1, NT)),),
        PT:  ((Same(0, PT),), (Same(1, PT),)),
        NPT: ((Same(0, NPT), Same(1, NPT)),),
    },
    Connective.IMPLIES: {
        T:   ((Same(0, NPT),), (Same(1, T),)),
        NT:  ((Same(0, PT), Same(1, NT)),),
        PT:  ((Same(0, NT),), (Same(1, PT),)),
        NPT: ((Same(0, T), Same(1, NPT)),),
    },
    Connective.BANG: {
        T:   ((Same(0, T), Same(1, T)),),
        NT:  ((Same(0, NT),), (Same(1, NT),)),
        PT:  ((Same(0, PT),), (Same(1, PT),)),
        NPT: ((Same(0, NPT), Same(1, NPT)),),
    },
}


def apply_rule(f: Formula, counter: SymbolCounter) -> list:
    """
    Mark f expanded and return its successors as a list of alternatives.

    counter supplies fresh labels for existential justification symbols.
    """
    f.expanded = True

    if f.quantifier == Quantifier.GENJUST:
        return []

    if f.quantifier != Quantifier.NONE:
        if f.quantifier == Quantifier.EXISTENTIAL:
            symbol = counter.fresh(f.rank)
        else:
            symbol = counter.variable(f.rank)
        g = f.derive(f.sign, f.knowledge, Quantifier.NONE, f.prefix + (symbol,))
        return [[g]]

    if f.is_atomic:
        return []

    if f.connective.is_ion:
        assert f.is_binary, f"ion without two arguments: {f}"
        return expand_ion(f)

    table = BOOLEAN_RULES[f.connective]
    alternatives = []
    for alternative in table.get(f.sign, ()):
        alternatives.append([
            f.child(slot.child).derive(slot.sign, f.knowledge, prefix=f.prefix)
            for slot in alternative
        ])
    return alternatives


def is_branching(f: Formula) -> bool:
    """
    Will f probably split the branch? Only used to schedule cheap
    formulas first; a wrong answer costs time, never models.
    """
    c = f.connective
    if c is None:
        return False
    if c == Connective.OR or c == Connective.IMPLIES:
        return f.sign == T
    if c in (Connective.AND, Connective.BOT, Connective.BANG):
        return f.sign == NT
    if c.is_ion:
        if f.sign == NPT:
            return False
        if f.sign == NT and c in NARROW_IONS:
            return False
        return True
    return False


def merge(branch: list, new: list) -> list:
    """New non-branching formulas go first, new branching ones go last."""
    front = [f for f in new if not is_branching(f)]
    back = [f for f in new if is_branching(f)]
    return front + list(branch) + back
