"""
PIIL: interpretation schemes for partial information ionic logic.

An analytic tableau prover for a four-valued logic of partial
information. Signed formulas (T, NT, PT, NPT) over propositional
variables, boolean connectives and nine binary "ions" are expanded
depth-first; every open branch becomes an interpretation scheme, and
two preference orderings pick out the minimal ones.

Usage:
    python -m piil knowledge_base.txt
    python -m piil knowledge_base.txt report.txt
    python -m piil --sample nixon
    python -m piil --sample tweety --trace --dot tableau.dot
"""

from .core.formula import (
    Sign, Knowledge, Quantifier, Connective, Formula, contradicts,
)
from .core.justification import JustificationSymbol, SymbolCounter
from .core.interpretation import Interpretation
from .core.engine import TableauState, expand_branch, solve
from .inference.rules import apply_rule, is_branching
from .inference.closure import check_closure
from .ordering import Ordering
from .parser import ParseError, parse, parse_sentence, strip_comments
from .visualization import format_report, print_report, print_history, export_dot

__all__ = [
    "Sign", "Knowledge", "Quantifier", "Connective", "Formula", "contradicts",
    "JustificationSymbol", "SymbolCounter",
    "Interpretation",
    "TableauState", "expand_branch", "solve",
    "apply_rule", "is_branching", "check_closure",
    "Ordering",
    "ParseError", "parse", "parse_sentence", "strip_comments",
    "format_report", "print_report", "print_history", "export_dot",
]
