"""
The tableau search.

Depth-first, one branch at a time:

    solve([a -> b, -b])
        [-b, a -> b]                      non-branching formulas first
        expand -b            -> [NPT b, a -> b]
        expand a -> b        -> split
            [NPT a, NPT b, ...]           open   -> <{⊯ a, ⊯ b}, {}, {}>
            [T b, NPT b, ...]             closed

The two sides of a split share every formula of the parent branch. The
expansion flags of those shared formulas are snapshotted before the
first side runs and restored before the second, so each side sees the
parent branch exactly as it was at the split.
"""

from dataclasses import dataclass, field
from typing import Optional

from .justification import SymbolCounter
from ..inference.rules import apply_rule, is_branching, merge
from ..inference.closure import check_closure


@dataclass
class TableauState:
    """
    Bookkeeping for one search.

    counter:          source of existential justification labels
    step:             rule applications so far
    open_branches:    branches that produced a model
    closed_branches:  branches that closed
    history:          one entry per rule application or branch end
    max_steps:        safety valve; None means unbounded
    """
    counter: SymbolCounter = field(default_factory=SymbolCounter)
    step: int = 0
    open_branches: int = 0
    closed_branches: int = 0
    history: list = field(default_factory=list)
    max_steps: Optional[int] = None

    def record_rule(self, f, alternatives, parent, branch_size) -> int:
        self.step += 1
        if self.max_steps is not None and self.step > self.max_steps:
            raise RuntimeError(
                f"Tableau exceeded max_steps={self.max_steps} "
                f"while expanding {f}"
            )
        self.history.append({
            "step": self.step,
            "parent": parent,
            "formula": f.render(),
            "produced": [[g.render() for g in alt] for alt in alternatives],
            "branch_size": branch_size,
        })
        return self.step

    def record_end(self, parent, model) -> None:
        if model is None:
            self.closed_branches += 1
        else:
            self.open_branches += 1
        self.history.append({
            "step": None,
            "parent": parent,
            "closed": model is None,
            "model": None if model is None else model.render(),
        })


def expand_branch(
    branch: list,
    state: TableauState,
    parent: Optional[int] = None,
    verbose: bool = False,
    right_first: bool = False,
) -> list:
    """
    Expand one branch to exhaustion and return its models.

    Picks the first unexpanded formula that has a rule. One alternative
    extends the branch; two alternatives split it. When nothing is left
    to expand the branch is checked for closure.

    Args:
        branch:       formulas on this branch, in scheduling order
        state:        TableauState shared by the whole search
        parent:       history step that produced this branch
        verbose:      print each rule application and branch end
        right_first:  explore the second alternative of a split first
    """
    for f in branch:
        if f.expanded:
            continue
        alternatives = apply_rule(f, state.counter)
        if not alternatives:
            continue
        assert len(alternatives) <= 2, f"rule for {f} produced {len(alternatives)} alternatives"

        step = state.record_rule(f, alternatives, parent, len(branch))
        if verbose:
            produced = " | ".join(
                "[" + ", ".join(g.render() for g in alt) + "]" for alt in alternatives
            )
            print(f"--- Step {step}: {f} -> {produced}")

        if len(alternatives) == 1:
            return expand_branch(merge(branch, alternatives[0]), state,
                                 step, verbose, right_first)

        snapshot = [g.expanded for g in branch]
        sides = (1, 0) if right_first else (0, 1)
        models = {}
        for n, side in enumerate(sides):
            if n > 0:
                for g, flag in zip(branch, snapshot):
                    g.expanded = flag
            models[side] = expand_branch(merge(branch, alternatives[side]), state,
                                         step, verbose, right_first)
        return models[0] + models[1]

    model = check_closure(branch)
    state.record_end(parent, model)
    if verbose:
        if model is None:
            print("  [closed]")
        else:
            print(f"  [open] {model}")
    return [] if model is None else [model]


def order_branch(formulas: list) -> list:
    """Stable partition: non-branching formulas first."""
    return ([f for f in formulas if not is_branching(f)] +
            [f for f in formulas if is_branching(f)])


def solve(
    formulas: list,
    verbose: bool = False,
    right_first: bool = False,
    state: Optional[TableauState] = None,
    max_steps: Optional[int] = None,
) -> list:
    """
    All interpretations of a list of signed formulas.

    The input is deep-copied first, so the caller's formulas are never
    marked expanded and the same list can be solved again. An empty
    result means the set is unsatisfiable.

    Args:
        formulas:     signed formulas, typically straight from the parser
        verbose:      print progress
        right_first:  explore second alternatives first (same model set)
        state:        TableauState to record into; a fresh one if None
        max_steps:    rule application limit for a fresh state
    """
    if state is None:
        state = TableauState(max_steps=max_steps)
    branch = order_branch([f.copy() for f in formulas])
    if verbose:
        print("Solving: [" + ", ".join(f.render() for f in branch) + "]")
    return expand_branch(branch, state, None, verbose, right_first)
