from .justification import (
    JustificationSymbol, SymbolCounter, prefixes_unify, extends_prefix,
)
from .formula import (
    Sign, Knowledge, Quantifier, Connective, Formula,
    contradicts, is_positive,
)
from .interpretation import Interpretation
from .engine import TableauState, expand_branch, order_branch, solve

__all__ = [
    "JustificationSymbol", "SymbolCounter", "prefixes_unify", "extends_prefix",
    "Sign", "Knowledge", "Quantifier", "Connective", "Formula",
    "contradicts", "is_positive",
    "Interpretation",
    "TableauState", "expand_branch", "order_branch", "solve",
]
