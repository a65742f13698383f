"""
Branch closure.

A fully expanded branch either closes (it is contradictory and contributes
no model) or becomes exactly one Interpretation.

Closure conditions, checked in this order:

    constants     False signed T/PT, or True signed NT/NPT
    bot           NPT bot(f)
    atoms         two atoms with the same variable and contradictory signs
                  whose prefixes unify (8.3.4 i), or where one prefix
                  extends the other (8.3.4 ii, iii)
    theorem 8.3.7 a hard rank-0 formula against a generic justification
                  of the same shape (or of its negation)
    theorem 8.3.8 two generic justifications: same shape, a conjunct of
                  the other, or the consequent of the other's implication

The surviving interpretation holds the branch's unquantified atoms plus
every generic justification formula, minus the two constants.
"""

from typing import Optional

from ..core.formula import (
    Formula, Knowledge, Quantifier, Connective, contradicts,
    T, NT, PT, NPT,
)
from ..core.justification import prefixes_unify, extends_prefix
from ..core.interpretation import Interpretation


def violates_constant(f: Formula) -> bool:
    """False can only be NT/NPT; True can only be T/PT."""
    if f.is_named("False"):
        return f.sign not in (NPT, NT)
    if f.is_named("True"):
        return f.sign not in (T, PT)
    return False


def atoms_clash(a1: Formula, a2: Formula) -> bool:
    """Closure rules 8.3.4 (i)-(iii) for an ordered pair of atoms."""
    if a1.name.lower() != a2.name.lower():
        return False
    if not contradicts(a1.sign, a2.sign):
        return False
    if prefixes_unify(a1.prefix, a2.prefix):
        return True
    if extends_prefix(a2.prefix, a1.prefix):
        # soft knowledge may extend hard knowledge, not the other way round
        return a1.knowledge != Knowledge.SOFT or a2.knowledge == Knowledge.SOFT
    return False


def generic_clash(f1: Formula, f2: Formula) -> bool:
    """Theorems 8.3.7 and 8.3.8 for an ordered pair of branch formulas."""
    s1, s2 = f1.sign, f2.sign
    grounded = f1.knowledge == Knowledge.HARD and f1.rank == 0
    generic1 = f1.quantifier == Quantifier.GENJUST
    generic2 = f2.quantifier == Quantifier.GENJUST

    if grounded and generic2 and f1.same_shape(f2):
        return contradicts(s1, s2)

    if (grounded and generic2 and f2.connective == Connective.NEGATION
            and f1.same_shape(f2.child(0))):
        return (s1 == NPT and s2 in (NPT, NT)) or (s1 == T and s2 in (T, PT))

    if generic1 and generic2:
        if f1.same_shape(f2) and contradicts(s1, s2):
            return True
        if f1.connective == Connective.AND:
            if (f1.child(0).same_shape(f2) or f1.child(1).same_shape(f2)) and s1 == T and s2 == NPT:
                return True
        elif f1.connective == Connective.IMPLIES and f1.child(1).same_shape(f2):
            return (s1, s2) in ((NPT, PT), (NT, T), (NPT, T))
    return False


def check_closure(branch: list) -> Optional[Interpretation]:
    """None if the branch is closed, else the interpretation it yields."""
    if not branch:
        return None

    atoms = []
    for f in branch:
        if f.is_atomic and f.quantifier == Quantifier.NONE:
            if violates_constant(f):
                return None
            if not f.is_constant:
                atoms.append(f)
        elif f.connective == Connective.BOT and f.sign == NPT:
            return None

    for i, a1 in enumerate(atoms):
        for j, a2 in enumerate(atoms):
            if i != j and atoms_clash(a1, a2):
                return None

    for i, f1 in enumerate(branch):
        if f1.is_atomic and violates_constant(f1):
            return None
        for j, f2 in enumerate(branch):
            if i != j and generic_clash(f1, f2):
                return None

    for f in branch:
        if f.quantifier == Quantifier.GENJUST and not f.is_constant:
            atoms.append(f)
    return Interpretation(atoms)
