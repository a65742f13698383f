"""
Tableau rules for the ions.

An ion *(f, g) reads "f is a justification for believing g". Expanding a
signed ion produces two kinds of successor:

    Just(sign, q)   the first argument f as a justification formula
                    (knowledge JUST, quantifier q)
    Soft(sign)      the second argument g as defeasible knowledge
                    (knowledge SOFT)

Each alternative is a list of successors conjoined on one branch; two
alternatives split the branch.

When the second argument is literally the atom False, the ion is a
"nogood" and produces a single Just successor from the `nogood` row.

The nine numbered ions differ only in the signs and quantifiers in their
tables, which encode the accessibility semantics of each symbol and are
not derivable from one another. Two table shapes occur:

    wide   (0, 1, 2, 5, 8 and the generic ion)
           NT splits into two alternatives sharing a common Just successor
    narrow (3, 4, 6, 7)
           NT is a single alternative

UNIVERSAL and EXISTENTIAL successors are expanded later, picking up a
justification symbol. GENJUST successors (generic ion only) are templates:
they are marked expanded on creation and never expanded again.
"""

from dataclasses import dataclass

from ..core.formula import (
    Formula, Sign, Knowledge, Quantifier, Connective,
    T, NT, PT, NPT,
)

U = Quantifier.UNIVERSAL
E = Quantifier.EXISTENTIAL
G = Quantifier.GENJUST


@dataclass(frozen=True)
class Just:
    """First argument, re-signed as a justification formula."""
    sign: Sign
    quantifier: Quantifier


@dataclass(frozen=True)
class Soft:
    """Second argument, re-signed as soft knowledge."""
    sign: Sign


@dataclass(frozen=True)
class IonRules:
    nogood: dict    # Sign -> Just
    rules: dict     # Sign -> tuple of alternatives (tuples of Just/Soft)


# ── Wide ions: NT splits ─────────────────────────────────────────────────────

DIAMOND = IonRules(                                    # *0
    nogood={T: Just(NPT, U), NT: Just(PT, E), PT: Just(NPT, E), NPT: Just(PT, U)},
    rules={
        T:   ((Just(PT, U), Soft(T)), (Just(NPT, U),)),
        NT:  ((Just(PT, E), Just(NPT, E), Soft(T)), (Just(PT, E), Soft(NT))),
        PT:  ((Just(NPT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(PT, U), Soft(NPT)),),
    },
)

HEART = IonRules(                                      # *1
    nogood={T: Just(NT, U), NT: Just(T, E), PT: Just(NT, E), NPT: Just(T, E)},
    rules={
        T:   ((Just(T, U), Soft(T)), (Just(NT, U),)),
        NT:  ((Just(T, E), Just(NT, E), Soft(T)), (Just(T, E), Soft(NT))),
        PT:  ((Just(NT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, U), Soft(NPT)),),
    },
)

CIRCLE = IonRules(                                     # *2
    nogood={T: Just(T, U), NT: Just(T, E), PT: Just(NT, E), NPT: Just(T, E)},
    rules={
        T:   ((Just(T, U), Soft(T)), (Just(NPT, U),)),
        NT:  ((Just(PT, E), Just(NT, E), Soft(T)), (Just(PT, E), Soft(NT))),
        PT:  ((Just(NT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, U), Soft(NPT)),),
    },
)

BULLET = IonRules(                                     # *5
    nogood={T: Just(NPT, U), NT: Just(PT, E), PT: Just(NT, U), NPT: Just(T, E)},
    rules={
        T:   ((Just(T, E), Soft(T)), (Just(NPT, U),)),
        NT:  ((Just(PT, E), Just(NT, U), Soft(T)), (Just(PT, E), Soft(NT))),
        PT:  ((Just(NT, U), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, E), Soft(NPT)),),
    },
)

BUTTERFLY = IonRules(                                  # *8
    nogood={T: Just(NPT, E), NT: Just(PT, U), PT: Just(NT, E), NPT: Just(T, U)},
    rules={
        T:   ((Just(T, U), Soft(T)), (Just(NPT, E),)),
        NT:  ((Just(PT, U), Just(NT, E), Soft(T)), (Just(PT, U), Soft(NT))),
        PT:  ((Just(NT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, U), Soft(NPT)),),
    },
)

GENERIC = IonRules(                                    # *
    nogood={T: Just(NPT, G), NT: Just(PT, G), PT: Just(NT, G), NPT: Just(T, G)},
    rules={
        T:   ((Just(T, G), Soft(T)), (Just(NPT, G),)),
        NT:  ((Just(PT, G), Just(NT, G), Soft(T)), (Just(PT, G), Soft(NT))),
        PT:  ((Just(NT, G), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, G), Soft(NPT)),),
    },
)

# ── Narrow ions: NT does not split ───────────────────────────────────────────

SPADE = IonRules(                                      # *3
    nogood={T: Just(NPT, U), NT: Just(PT, E), PT: Just(NPT, U), NPT: Just(PT, E)},
    rules={
        T:   ((Just(NPT, E), Soft(T)), (Just(NPT, U),)),
        NT:  ((Just(PT, E), Soft(NT)),),
        PT:  ((Just(NPT, U), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(PT, E), Soft(NPT)),),
    },
)

CLUB = IonRules(                                       # *4
    nogood={T: Just(NT, U), NT: Just(T, E), PT: Just(NT, U), NPT: Just(T, E)},
    rules={
        T:   ((Just(T, E), Soft(T)), (Just(NT, U),)),
        NT:  ((Just(T, E), Soft(NT)),),
        PT:  ((Just(NT, U), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, E), Soft(NPT)),),
    },
)

SPADE_TWIN = IonRules(                                 # *6
    nogood={T: Just(NPT, E), NT: Just(PT, U), PT: Just(NPT, E), NPT: Just(PT, U)},
    rules={
        T:   ((Just(PT, U), Soft(T)), (Just(NPT, E),)),
        NT:  ((Just(PT, U), Soft(NT)),),
        PT:  ((Just(NPT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(PT, U), Soft(NPT)),),
    },
)

CLUB_TWIN = IonRules(                                  # *7
    nogood={T: Just(NT, E), NT: Just(T, U), PT: Just(NT, E), NPT: Just(T, U)},
    rules={
        T:   ((Just(T, U), Soft(T)), (Just(NT, E),)),
        NT:  ((Just(T, U), Soft(NT)),),
        PT:  ((Just(NT, E), Soft(NPT)), (Soft(PT),)),
        NPT: ((Just(T, U), Soft(NPT)),),
    },
)


ION_RULES = {
    Connective.ION_0: DIAMOND,
    Connective.ION_1: HEART,
    Connective.ION_2: CIRCLE,
    Connective.ION_3: SPADE,
    Connective.ION_4: CLUB,
    Connective.ION_5: BULLET,
    Connective.ION_6: SPADE_TWIN,
    Connective.ION_7: CLUB_TWIN,
    Connective.ION_8: BUTTERFLY,
    Connective.GENERIC_ION: GENERIC,
}

NARROW_IONS = frozenset({
    Connective.ION_3, Connective.ION_4, Connective.ION_6, Connective.ION_7,
})


def is_nogood(f: Formula) -> bool:
    """*(f, False): the second argument is the constant False."""
    return f.connective.is_ion and f.child(1).is_named("False")


def build_successor(f: Formula, slot) -> Formula:
    """Instantiate one table slot against the ion formula f."""
    if isinstance(slot, Just):
        g = f.child(0).derive(slot.sign, Knowledge.JUST, slot.quantifier, f.prefix)
        if slot.quantifier == Quantifier.GENJUST:
            g.expanded = True
        return g
    return f.child(1).derive(slot.sign, Knowledge.SOFT, prefix=f.prefix)


def expand_ion(f: Formula) -> list:
    """
    Apply the ion rule for f's connective and sign.

    Returns a list of alternatives (each a list of new formulas);
    empty when the sign has no rule.
    """
    table = ION_RULES[f.connective]
    if is_nogood(f):
        slot = table.nogood.get(f.sign)
        if slot is None:
            return []
        return [[build_successor(f, slot)]]

    return [
        [build_successor(f, slot) for slot in alternative]
        for alternative in table.rules.get(f.sign, ())
    ]
