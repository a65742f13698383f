"""
Property-based and unit tests for the boolean tableau rules.

Core claims:
    - Every successor inherits the parent's knowledge and prefix
    - A rule produces at most two alternatives
    - Quantified formulas drop their quantifier and gain one symbol
    - merge() keeps non-branching successors in front of the branch
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from piil.core.formula import Formula, Connective, Knowledge, Quantifier, T, NT, PT, NPT
from piil.core.justification import JustificationSymbol, SymbolCounter
from piil.inference.rules import apply_rule, is_branching, merge, BOOLEAN_RULES


# ── Helpers ──────────────────────────────────────────────────────────────────

a, b = Formula.atom("a"), Formula.atom("b")


def signed(f, sign, knowledge=Knowledge.HARD, prefix=()):
    return f.derive(sign, knowledge, prefix=prefix)


def binary(c, sign, **kw):
    return signed(Formula.binary(c, a, b), sign, **kw)


def unary(c, sign, **kw):
    return signed(Formula.unary(c, a), sign, **kw)


def shape(alternatives):
    """[[(name, sign), ...], ...] for compact comparisons."""
    return [[(g.name, g.sign) for g in alt] for alt in alternatives]


def expand(f):
    return apply_rule(f, SymbolCounter())


# ── Boolean connectives ──────────────────────────────────────────────────────

class TestBinaryRules:
    @pytest.mark.parametrize("sign,expected", [
        (T,   [[("a", T), ("b", T)]]),
        (NT,  [[("a", NT)], [("b", NT)]]),
        (PT,  [[("a", PT), ("b", PT)]]),
        (NPT, [[("a", NPT)], [("b", NPT)]]),
    ])
    def test_and(self, sign, expected):
        assert shape(expand(binary(Connective.AND, sign))) == expected

    @pytest.mark.parametrize("sign,expected", [
        (T,   [[("a", T)], [("b", T)]]),
        (NT,  [[("a", NT), ("b", NT)]]),
        (PT,  [[("a", PT)], [("b", PT)]]),
        (NPT, [[("a", NPT), ("b", NPT)]]),
    ])
    def test_or(self, sign, expected):
        assert shape(expand(binary(Connective.OR, sign))) == expected

    @pytest.mark.parametrize("sign,expected", [
        (T,   [[("a", NPT)], [("b", T)]]),
        (NT,  [[("a", PT), ("b", NT)]]),
        (PT,  [[("a", NT)], [("b", PT)]]),
        (NPT, [[("a", T), ("b", NPT)]]),
    ])
    def test_implies(self, sign, expected):
        assert shape(expand(binary(Connective.IMPLIES, sign))) == expected

    @pytest.mark.parametrize("sign,expected", [
        (T,   [[("a", T), ("b", T)]]),
        (NT,  [[("a", NT)], [("b", NT)]]),
        (PT,  [[("a", PT)], [("b", PT)]]),
        (NPT, [[("a", NPT), ("b", NPT)]]),
    ])
    def test_bang(self, sign, expected):
        assert shape(expand(binary(Connective.BANG, sign))) == expected


class TestUnaryRules:
    @pytest.mark.parametrize("c,expected", [
        (Connective.NEGATION,        {T: NPT, NT: PT, PT: NT, NPT: T}),
        (Connective.STRONG_NEGATION, {T: NT, NT: T, PT: NT, NPT: T}),
        (Connective.WEAK_NEGATION,   {T: NPT, NT: PT, PT: NPT, NPT: PT}),
    ])
    def test_negations(self, c, expected):
        for sign, result in expected.items():
            assert shape(expand(unary(c, sign))) == [[("a", result)]]

    def test_bot_true(self):
        assert shape(expand(unary(Connective.BOT, T))) == [[("a", PT), ("a", NT)]]

    def test_bot_not_true(self):
        assert shape(expand(unary(Connective.BOT, NT))) == [[("a", T)], [("a", NPT)]]

    @pytest.mark.parametrize("sign", [PT, NPT])
    def test_bot_has_no_rule_for_potential_signs(self, sign):
        assert expand(unary(Connective.BOT, sign)) == []


class TestApplyRule:
    def test_marks_expanded(self):
        f = binary(Connective.AND, T)
        expand(f)
        assert f.expanded

    def test_atom_has_no_rule(self):
        f = signed(a, T)
        assert expand(f) == []
        assert f.expanded

    def test_unsigned_has_no_rule(self):
        assert expand(Formula.binary(Connective.AND, a, b)) == []

    def test_successors_inherit_knowledge_and_prefix(self):
        prefix = (JustificationSymbol(0, 4),)
        f = binary(Connective.OR, T, knowledge=Knowledge.SOFT, prefix=prefix)
        for alt in expand(f):
            for g in alt:
                assert g.knowledge == Knowledge.SOFT
                assert g.prefix == prefix
                assert not g.expanded

    def test_successors_are_new_nodes(self):
        f = binary(Connective.AND, T)
        (alt,) = expand(f)
        assert alt[0] is not a
        assert a.sign not in (T, NT, PT, NPT)
        assert a.knowledge == Knowledge.UNKNOWN

    def test_universal_gets_variable_symbol(self):
        f = a.derive(NPT, Knowledge.JUST, Quantifier.UNIVERSAL, (JustificationSymbol(1, 2),))
        (alt,) = expand(f)
        (g,) = alt
        assert g.quantifier == Quantifier.NONE
        assert g.sign == NPT and g.knowledge == Knowledge.JUST
        assert g.prefix == (JustificationSymbol(1, 2), JustificationSymbol(0, 0))

    def test_existential_gets_fresh_symbols(self):
        counter = SymbolCounter()
        f1 = a.derive(PT, Knowledge.JUST, Quantifier.EXISTENTIAL)
        f2 = b.derive(PT, Knowledge.JUST, Quantifier.EXISTENTIAL)
        g1 = apply_rule(f1, counter)[0][0]
        g2 = apply_rule(f2, counter)[0][0]
        assert g1.prefix == (JustificationSymbol(0, 1),)
        assert g2.prefix == (JustificationSymbol(0, 2),)

    def test_symbol_rank_follows_formula(self):
        ion = Formula.binary(Connective.ION_0, a, b)
        f = ion.derive(T, Knowledge.JUST, Quantifier.UNIVERSAL)
        g = expand(f)[0][0]
        assert g.prefix[0].rank == 1
        assert g.connective == Connective.ION_0

    def test_generic_template_never_expands(self):
        f = a.derive(T, Knowledge.JUST, Quantifier.GENJUST)
        assert expand(f) == []

    @given(st.sampled_from(list(BOOLEAN_RULES)), st.sampled_from([T, NT, PT, NPT]))
    def test_at_most_two_alternatives(self, c, sign):
        f = unary(c, sign) if c.is_unary else binary(c, sign)
        assert len(expand(f)) <= 2


# ── Scheduling ───────────────────────────────────────────────────────────────

class TestIsBranching:
    @pytest.mark.parametrize("c,sign,expected", [
        (Connective.OR, T, True),
        (Connective.OR, NT, False),
        (Connective.IMPLIES, T, True),
        (Connective.IMPLIES, NPT, False),
        (Connective.AND, NT, True),
        (Connective.AND, T, False),
        (Connective.BANG, NT, True),
        (Connective.BANG, NPT, False),
        (Connective.ION_0, T, True),
        (Connective.ION_0, NT, True),
        (Connective.ION_0, PT, True),
        (Connective.ION_0, NPT, False),
        (Connective.ION_3, NT, False),
        (Connective.ION_3, T, True),
        (Connective.GENERIC_ION, NT, True),
        (Connective.GENERIC_ION, NPT, False),
    ])
    def test_binary(self, c, sign, expected):
        assert is_branching(binary(c, sign)) == expected

    def test_bot(self):
        assert is_branching(unary(Connective.BOT, NT))
        assert not is_branching(unary(Connective.BOT, T))

    def test_negation_never_branches(self):
        for sign in (T, NT, PT, NPT):
            assert not is_branching(unary(Connective.NEGATION, sign))

    def test_atom_never_branches(self):
        assert not is_branching(signed(a, T))


class TestMerge:
    def test_order(self):
        old = [signed(Formula.atom("x"), T)]
        cheap = signed(a, T)
        split = binary(Connective.OR, T)
        merged = merge(old, [split, cheap])
        assert merged == [cheap, old[0], split]

    def test_original_branch_untouched(self):
        old = [signed(a, T)]
        merge(old, [signed(b, T)])
        assert len(old) == 1
