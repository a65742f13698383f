"""
Sample knowledge bases.

Each sample is a dict:
    source:       the knowledge base text, as it would appear in a file
    description:  str
"""

from .parser import parse


SAMPLES = {
    "contradiction": {
        "source": "a & -a",
        "description": "A conjunction with its own negation: no model",
    },
    "modus_ponens": {
        "source": "T a -> b; T a",
        "description": "Implication plus its antecedent: one model with b",
    },
    "disjunction": {
        "source": "T a | b",
        "description": "Plain disjunction: one model per disjunct",
    },
    "nogood": {
        "source": "T *0(p, False)",
        "description": "Nogood shorthand for the diamond ion",
    },
    "tweety": {
        "source": (
            "/* birds normally fly; tweety is a bird */\n"
            "T bird\n"
            "T *0(bird, flies)\n"
        ),
        "description": "Default reasoning through a diamond ion",
    },
    "nixon": {
        "source": (
            "/* the Nixon diamond */\n"
            "T quaker; T republican\n"
            "T *0(quaker, pacifist)\n"
            "T *0(republican, -pacifist)\n"
        ),
        "description": "Two defaults with conflicting conclusions",
    },
    "generic": {
        "source": "T *(a, b); T a",
        "description": "Generic ion: justification templates instead of symbols",
    },
}


def make_sample(name: str) -> list:
    """Parsed formulas of a named sample."""
    if name not in SAMPLES:
        raise ValueError(
            f"Unknown sample: {name!r}. "
            f"Choose from: {list(SAMPLES.keys())}"
        )
    return parse(SAMPLES[name]["source"])
