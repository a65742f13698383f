"""
Tests for the ion rules.

Core claims:
    - Every ion has a rule and a nogood row for each of the four signs
    - Wide ions split on NT, narrow ions (3, 4, 6, 7) do not
    - Just successors come from the first argument, Soft from the second,
      and both keep the ion's prefix
    - Only generic-ion justifications are born expanded
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from piil.core.formula import Formula, Connective, Knowledge, Quantifier, T, NT, PT, NPT
from piil.core.justification import JustificationSymbol, SymbolCounter
from piil.inference.ions import (
    ION_RULES, NARROW_IONS, Just, Soft, expand_ion, is_nogood,
    DIAMOND, CLUB_TWIN,
)
from piil.inference.rules import apply_rule
from piil.parser import parse_sentence


# ── Helpers ──────────────────────────────────────────────────────────────────

p, q = Formula.atom("p"), Formula.atom("q")

ions = st.sampled_from(list(ION_RULES))
signs = st.sampled_from([T, NT, PT, NPT])


def ion(c, sign, second=q, prefix=()):
    return Formula.binary(c, p, second).derive(sign, Knowledge.HARD, prefix=prefix)


# ── Tables ───────────────────────────────────────────────────────────────────

class TestTables:
    @pytest.mark.parametrize("c", list(ION_RULES))
    def test_every_sign_covered(self, c):
        table = ION_RULES[c]
        assert set(table.rules) == {T, NT, PT, NPT}
        assert set(table.nogood) == {T, NT, PT, NPT}

    @pytest.mark.parametrize("c", list(ION_RULES))
    def test_shape(self, c):
        table = ION_RULES[c]
        assert len(table.rules[T]) == 2
        assert len(table.rules[PT]) == 2
        assert len(table.rules[NPT]) == 1
        assert len(table.rules[NT]) == (1 if c in NARROW_IONS else 2)

    def test_narrow_ions(self):
        assert {c.ion_index for c in NARROW_IONS} == {3, 4, 6, 7}

    @pytest.mark.parametrize("c", list(ION_RULES))
    def test_quantifiers(self, c):
        expected = ({Quantifier.GENJUST} if c == Connective.GENERIC_ION
                    else {Quantifier.UNIVERSAL, Quantifier.EXISTENTIAL})
        table = ION_RULES[c]
        slots = [s for alts in table.rules.values() for alt in alts for s in alt]
        slots += list(table.nogood.values())
        for slot in slots:
            if isinstance(slot, Just):
                assert slot.quantifier in expected

    def test_diamond_true(self):
        assert DIAMOND.rules[T] == (
            (Just(PT, Quantifier.UNIVERSAL), Soft(T)),
            (Just(NPT, Quantifier.UNIVERSAL),),
        )

    def test_club_twin_not_true(self):
        assert CLUB_TWIN.rules[NT] == ((Just(T, Quantifier.UNIVERSAL), Soft(NT)),)


# ── Expansion ────────────────────────────────────────────────────────────────

class TestExpandIon:
    def test_diamond_true(self):
        alts = expand_ion(ion(Connective.ION_0, T))
        assert len(alts) == 2
        just, soft = alts[0]
        assert just.name == "p" and just.sign == PT
        assert just.knowledge == Knowledge.JUST
        assert just.quantifier == Quantifier.UNIVERSAL
        assert soft.name == "q" and soft.sign == T
        assert soft.knowledge == Knowledge.SOFT
        assert soft.quantifier == Quantifier.NONE
        (only,) = alts[1]
        assert only.sign == NPT

    @given(ions, signs)
    def test_successors_come_from_the_right_argument(self, c, sign):
        for alt in expand_ion(ion(c, sign)):
            for g in alt:
                if g.knowledge == Knowledge.JUST:
                    assert g.name == "p"
                else:
                    assert g.knowledge == Knowledge.SOFT
                    assert g.name == "q"

    @given(ions, signs)
    def test_prefix_inherited(self, c, sign):
        prefix = (JustificationSymbol(0, 0), JustificationSymbol(1, 3))
        for alt in expand_ion(ion(c, sign, prefix=prefix)):
            for g in alt:
                assert g.prefix == prefix

    @given(ions, signs)
    def test_only_generic_justifications_born_expanded(self, c, sign):
        for alt in expand_ion(ion(c, sign)):
            for g in alt:
                assert g.expanded == (g.quantifier == Quantifier.GENJUST)

    def test_generic_justifications(self):
        alts = expand_ion(ion(Connective.GENERIC_ION, NT))
        just = [g for alt in alts for g in alt if g.knowledge == Knowledge.JUST]
        assert just
        assert all(g.quantifier == Quantifier.GENJUST and g.expanded for g in just)

    def test_unsigned_ion_has_no_rule(self):
        assert expand_ion(Formula.binary(Connective.ION_0, p, q)) == []


class TestNogood:
    def test_detected(self):
        assert is_nogood(ion(Connective.ION_0, T, second=Formula.atom("False")))
        assert is_nogood(ion(Connective.ION_0, T, second=Formula.atom("FALSE")))
        assert not is_nogood(ion(Connective.ION_0, T))

    def test_diamond_nogood(self):
        f = parse_sentence("T *0(p, False)")
        alts = apply_rule(f, SymbolCounter())
        assert len(alts) == 1
        (g,) = alts[0]
        assert g.name == "p"
        assert g.sign == NPT
        assert g.knowledge == Knowledge.JUST
        assert g.quantifier == Quantifier.UNIVERSAL
        assert not g.expanded

    @given(ions, signs)
    def test_single_just_successor(self, c, sign):
        alts = expand_ion(ion(c, sign, second=Formula.atom("False")))
        assert len(alts) == 1
        (g,) = alts[0]
        assert g.knowledge == Knowledge.JUST
        assert g.sign == ION_RULES[c].nogood[sign].sign

    def test_false_in_first_argument_is_not_nogood(self):
        f = Formula.binary(Connective.ION_0, Formula.atom("False"), q)
        assert not is_nogood(f.derive(T, Knowledge.HARD))
