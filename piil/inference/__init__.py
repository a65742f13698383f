from .rules import apply_rule, is_branching, merge, BOOLEAN_RULES
from .ions import expand_ion, ION_RULES, NARROW_IONS
from .closure import check_closure

__all__ = [
    "apply_rule", "is_branching", "merge", "BOOLEAN_RULES",
    "expand_ion", "ION_RULES", "NARROW_IONS",
    "check_closure",
]
