"""
CLI entry point. Run as: python -m piil INPUT [OUTPUT]
                     or: python -m piil --sample <name>
"""

import argparse
import json
import sys

from .core.engine import TableauState, solve
from .ordering import Ordering
from .parser import parse, ParseError
from .samples import SAMPLES, make_sample
from .visualization import format_report, print_history, export_dot


def build_json(formulas, models, ordering) -> dict:
    return {
        "input": [f.to_dict() for f in formulas],
        "models": [m.to_dict() for m in models],
        "justification_minimal": [m.render() for m in ordering.justification_minimal()],
        "warrant_minimal": [m.render() for m in ordering.warrant_minimal()],
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Interpretation schemes for partial information ionic logic",
    )
    parser.add_argument("input", nargs="?", default=None, help="Knowledge base file")
    parser.add_argument("output", nargs="?", default=None,
                        help="Write the report here instead of stdout")
    parser.add_argument("--sample", choices=list(SAMPLES.keys()), default=None,
                        help="Solve a built-in sample instead of a file")
    parser.add_argument("--encoding", type=str, default="utf-8",
                        help="Encoding of input and output files (default utf-8)")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--trace", action="store_true", help="Print the rule history")
    parser.add_argument("--dot", type=str, default=None, help="Export the tableau as DOT")
    parser.add_argument("--right-first", action="store_true",
                        help="Explore the second alternative of each split first")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="Give up after this many rule applications")
    parser.add_argument("--verbose", action="store_true", help="Print search progress")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    if args.sample is None and args.input is None:
        parser.error("an INPUT file or --sample is required")

    # --- Read and parse ---
    try:
        if args.sample:
            formulas = make_sample(args.sample)
        else:
            with open(args.input, encoding=args.encoding) as f:
                formulas = parse(f.read())
    except OSError as e:
        print(f"Error occurred while reading from input file: {e}", file=sys.stderr)
        sys.exit(1)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # --- Solve ---
    state = TableauState(max_steps=args.max_steps)
    try:
        models = solve(formulas, verbose=args.verbose,
                       right_first=args.right_first, state=state)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    ordering = Ordering(models)
    if args.json:
        report = json.dumps(build_json(formulas, models, ordering),
                            indent=2, ensure_ascii=False) + "\n"
    else:
        report = format_report(formulas, models, ordering)

    # --- Write ---
    if args.output:
        with open(args.output, "w", encoding=args.encoding) as f:
            f.write(report)
        if not args.quiet:
            print("Done.")
    else:
        sys.stdout.write(report)

    if args.trace:
        print_history(state)

    if args.dot:
        export_dot(state, args.dot)


if __name__ == "__main__":
    main()
