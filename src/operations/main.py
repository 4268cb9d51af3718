"""
Command-line entry point for the operations-research solvers.

Examples:
    or-engine transportation --describe
    or-engine transportation -i problem.json -m vogels
    or-engine linear_programming -i lp.json -v
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from transportation.modi import MAX_MODI_ITERATIONS, TOLERANCE

from .dispatch import OPERATIONS, ProblemKind, resolve_kind
from .parser import ProblemFileError, build_arguments, load_problem


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Solve transportation, assignment, graphical LP and precedence network problems',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        'problem',
        type=str,
        help='Problem kind: ' + ', '.join(k.value for k in ProblemKind)
    )

    parser.add_argument(
        '-i', '--input',
        type=str,
        default=None,
        help='JSON problem file ("-" reads stdin)'
    )

    parser.add_argument(
        '-m', '--method',
        type=str,
        default=None,
        help='Solution method key (overrides the method in the problem file)'
    )

    parser.add_argument(
        '--describe',
        action='store_true',
        help='Print the prompt and available methods instead of solving'
    )

    parser.add_argument(
        '--max-iter',
        type=int,
        default=MAX_MODI_ITERATIONS,
        help='Maximum number of MODI iterations'
    )

    parser.add_argument(
        '--tolerance',
        type=float,
        default=TOLERANCE,
        help='Reduced-cost tolerance for the MODI optimality test'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose (debug) logging'
    )

    return parser.parse_args(argv)


def to_jsonable(result: Any) -> Any:
    if hasattr(result, "to_dict"):
        return result.to_dict()
    if isinstance(result, str):
        return {"message": result}
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_arguments(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        kind = resolve_kind(args.problem)
        if kind is None:
            logger.error(f"Unknown problem kind: {args.problem}")
            return 1
        operation = OPERATIONS[kind]

        if args.describe:
            print(json.dumps(operation(), indent=2))
            return 0

        if not args.input:
            logger.error("--input is required unless --describe is given")
            return 1

        data = load_problem(args.input)
        positional, keywords = build_arguments(kind, data, args.method)
        if kind is ProblemKind.TRANSPORTATION:
            keywords.update(max_iterations=args.max_iter, tolerance=args.tolerance)

        logger.info(f"Solving {kind.value} problem from {args.input}")
        result = operation(*positional, **keywords)
        print(json.dumps(to_jsonable(result), indent=2))

        if isinstance(result, str) or getattr(result, "error", None):
            return 1
        return 0

    except ProblemFileError as e:
        logger.error(str(e))
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1

    except Exception as e:
        logger.exception(f"Error occurred: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
