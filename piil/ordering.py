"""
Preference orderings over interpretations.

Not every model of a knowledge base is equally good. Two preorders pick
out the preferred ones:

    justification ordering
        i precedes j when i believes at least the positive justifications
        of j and at most the negative justifications of j.

    warrant ordering
        i precedes j under the justification ordering, every hard fact
        of i also holds (with the same sign) in j, and every soft
        conclusion of j also holds in i.

A model is minimal when no other model strictly precedes it. Both
orderings are preorders, so ties survive together.

Before comparing, hard knowledge that has the same shape as some
justification formula in any model is folded into that model's
justification sets, keeping its positive/negative side by sign.
"""

from typing import Callable

from .core.formula import is_positive


def _member(f, formulas) -> bool:
    return any(f.same_shape(g) for g in formulas)


def _signed_member(f, formulas) -> bool:
    return any(f.signed_equal(g) for g in formulas)


class Ordering:
    """Justification and warrant orderings over a fixed list of models."""

    def __init__(self, models: list):
        self.models = list(models)
        self.positive = []
        self.negative = []

        for model in self.models:
            self.positive.append([f for f in model.justification if is_positive(f.sign)])
            self.negative.append([f for f in model.justification if not is_positive(f.sign)])

        all_positive = [f for side in self.positive for f in side]
        all_negative = [f for side in self.negative for f in side]

        for i, model in enumerate(self.models):
            for f in model.hard:
                if is_positive(f.sign):
                    if _member(f, all_positive):
                        self.positive[i].append(f)
                elif _member(f, all_negative):
                    self.negative[i].append(f)

    def precedes_justification(self, i: int, j: int) -> bool:
        """Model i is at least as preferred as model j by justification."""
        if not all(_member(f, self.positive[i]) for f in self.positive[j]):
            return False
        return all(_member(f, self.negative[j]) for f in self.negative[i])

    def precedes_warrant(self, i: int, j: int) -> bool:
        """Model i is at least as preferred as model j by warrant."""
        if not self.precedes_justification(i, j):
            return False
        mi, mj = self.models[i], self.models[j]
        if not all(_signed_member(f, mj.hard) for f in mi.hard):
            return False
        return all(_signed_member(f, mi.soft) for f in mj.soft)

    def minimal(self, precedes: Callable) -> list:
        """Models not strictly preceded by any other model, in order."""
        result = []
        for i, model in enumerate(self.models):
            dominated = any(
                precedes(j, i) and not precedes(i, j)
                for j in range(len(self.models)) if j != i
            )
            if not dominated:
                result.append(model)
        return result

    def justification_minimal(self) -> list:
        return self.minimal(self.precedes_justification)

    def warrant_minimal(self) -> list:
        return self.minimal(self.precedes_warrant)
