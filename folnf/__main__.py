"""Command line interface. Run as: python -m folnf FORMULA
"""

import argparse
import logging
from dataclasses import fields
import sys
from typing import Optional, Sequence

from .engine import Engine, Report
from .normalform import HornPartition
from .support.excepthook import NoTraceException

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def format_result(result: object) -> list[str]:
    match result:
        case list():
            return [f'  {i}. {clause}' for i, clause in enumerate(result, start=1)]
        case HornPartition(horn=horn, not_horn=not_horn):
            return [f'  horn: {", ".join(f"[{clause}]" for clause in horn)}',
                    f'  not horn: {", ".join(f"[{clause}]" for clause in not_horn)}']
        case _:
            return [f'  {result}']


def print_report(report: Report, steps: bool = False) -> None:
    for f in fields(report):
        derivation = getattr(report, f.name)
        print(f'{f.name}:')
        if steps:
            for step in derivation.steps:
                print(f'    {step}')
        for line in format_result(derivation.result):
            print(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='folnf',
        description='Normal forms of first-order formulas in LaTeX notation')
    parser.add_argument('formula', help=r"Formula, e.g. '\forall x (P(x) \to Q(x))'")
    parser.add_argument('--budget', type=int, default=5000,
                        help='Rewrite budget for each CNF and DNF distribution (default 5000)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, default=None,
                        help='Log the steps of the computation')
    parser.add_argument('--steps', action='store_true',
                        help='Print the steps of each derivation')
    args = parser.parse_args(argv)

    log_level = logging.NOTSET if args.log_level is None else getattr(logging, args.log_level)
    try:
        engine = Engine(budget=args.budget, log_level=log_level)
        report = engine(args.formula)
    except (NoTraceException, ValueError) as exc:
        print(f'{type(exc).__name__}: {exc}', file=sys.stderr)
        return 1
    print_report(report, steps=args.steps)
    return 0


if __name__ == '__main__':
    sys.exit(main())
