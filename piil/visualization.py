"""
Reporting utilities: the model report, the rule history, and a DOT
export of the tableau.
"""

from .core.engine import TableauState
from .ordering import Ordering


def format_report(formulas: list, models: list, ordering: Ordering = None) -> str:
    """
    The plain-text report: input, models, then the minimal models under
    both orderings. No models is reported as "No model found."
    """
    lines = ["Input: [" + ", ".join(f.render() for f in formulas) + "]", ""]
    if not models:
        lines.append("No model found.")
        return "\n".join(lines) + "\n"

    if len(models) == 1:
        lines.append("1 model found.")
    else:
        lines.append(f"{len(models)} models found.")
    lines.extend(m.render() for m in models)

    if ordering is None:
        ordering = Ordering(models)
    lines.append("Minimal models according to justification ordering:")
    lines.extend(m.render() for m in ordering.justification_minimal())
    lines.append("Minimal models according to warrant ordering:")
    lines.extend(m.render() for m in ordering.warrant_minimal())
    return "\n".join(lines) + "\n"


def print_report(formulas: list, models: list, ordering: Ordering = None):
    print(format_report(formulas, models, ordering), end="")


def print_history(state: TableauState):
    """Print every rule application and branch end of a search."""
    print(f"\n{'='*60}")
    print(f"Tableau history ({state.step} rule applications, "
          f"{state.open_branches} open / {state.closed_branches} closed branches):")
    print(f"{'='*60}")
    for entry in state.history:
        if entry["step"] is None:
            outcome = "closed" if entry["closed"] else f"open {entry['model']}"
            print(f"  after step {entry['parent']}: {outcome}")
            continue
        produced = " | ".join("[" + ", ".join(alt) + "]" for alt in entry["produced"])
        print(f"  Step {entry['step']}: {entry['formula']} -> {produced}")


def export_dot(state: TableauState, path="tableau.dot"):
    """Export the tableau (rule applications and branch ends) as DOT."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("digraph tableau {\n")
        f.write("  node [shape=box, style=rounded];\n")
        f.write('  "root" [label="input", shape=ellipse];\n')

        ends = 0
        for entry in state.history:
            parent = "root" if entry["parent"] is None else f"s{entry['parent']}"
            if entry["step"] is None:
                ends += 1
                node = f"end{ends}"
                if entry["closed"]:
                    label, color = "closed", "lightgray"
                else:
                    label, color = entry["model"], "lightblue"
            else:
                node = f"s{entry['step']}"
                label, color = entry["formula"], "white"
            label = label.replace('"', '\\"')
            f.write(f'  "{node}" [label="{label}", fillcolor={color}, style=filled];\n')
            f.write(f'  "{parent}" -> "{node}";\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
