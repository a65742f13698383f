"""
Interpretation schemes.

An Interpretation is what an open, fully expanded tableau branch says
about the world, split three ways:

    hard           premises and their consequences
    justification  JUST formulas (with prefixes) and generic templates
    soft           defeasible conclusions drawn inside ions

Rendered as  <{hard...}, {justification...}, {soft...}>
"""

from .formula import Formula, Knowledge, Quantifier

GENERIC_GLYPHS = (("⊨", "+*"), ("⊭", "+/*"), ("⊫", "-/*"), ("⊯", "-*"))


def _sort_key(f: Formula):
    # compound justification templates sort after every atom
    if f.name is None:
        return (1, "")
    return (0, f.name.lower())


def _dedupe(formulas) -> list:
    kept = []
    for f in formulas:
        if not any(f.matches(k) for k in kept):
            kept.append(f)
    return kept


class Interpretation:
    """One model: the deduplicated, name-sorted partition of a branch."""

    def __init__(self, formulas):
        hard, soft, just = [], [], []
        for f in formulas:
            if f.knowledge == Knowledge.HARD:
                hard.append(f)
            elif f.knowledge == Knowledge.SOFT:
                soft.append(f)
            else:
                just.append(f)
        self._hard = tuple(sorted(_dedupe(hard), key=_sort_key))
        self._justification = tuple(sorted(_dedupe(just), key=_sort_key))
        self._soft = tuple(sorted(_dedupe(soft), key=_sort_key))

    @property
    def hard(self) -> tuple:
        return self._hard

    @property
    def justification(self) -> tuple:
        return self._justification

    @property
    def soft(self) -> tuple:
        return self._soft

    @staticmethod
    def _render_by_name(formulas) -> list:
        """Suppress an entry whose variable repeats the previous one's."""
        parts = []
        for i, f in enumerate(formulas):
            if i > 0 and f.name is not None and formulas[i - 1].name is not None \
                    and f.name.lower() == formulas[i - 1].name.lower():
                continue
            parts.append(f.render())
        return parts

    @staticmethod
    def _render_justification(formulas) -> list:
        parts = []
        for f in formulas:
            text = f.render()
            if f.quantifier == Quantifier.GENJUST:
                for turnstile, glyph in GENERIC_GLYPHS:
                    text = text.replace(turnstile, glyph)
            parts.append(text)
        return parts

    def render(self) -> str:
        hard = ",".join(self._render_by_name(self._hard))
        just = ",".join(self._render_justification(self._justification))
        soft = ",".join(self._render_by_name(self._soft))
        return f"<{{{hard}}}, {{{just}}}, {{{soft}}}>"

    def to_dict(self):
        return {
            "text": self.render(),
            "hard": [f.to_dict() for f in self._hard],
            "justification": [f.to_dict() for f in self._justification],
            "soft": [f.to_dict() for f in self._soft],
        }

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"Interpretation({self.render()})"
