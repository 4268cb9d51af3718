"""
Problem-file parsing for the command-line interface.

Problem files are JSON objects; see build_arguments() for the keys each
problem kind expects.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .dispatch import ProblemKind

logger = logging.getLogger(__name__)


class ProblemFileError(Exception):
    pass


def load_problem(source: str) -> Dict[str, Any]:
    """
    Read a JSON problem from a file path, or from stdin when source is "-".
    """
    try:
        if source == "-":
            text = sys.stdin.read()
        else:
            path = Path(source)
            if not path.exists():
                raise ProblemFileError(f"Input file not found: {path}")
            text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProblemFileError(f"Invalid JSON in {source}: {e}") from e

    if not isinstance(data, dict):
        raise ProblemFileError("Problem file must contain a JSON object")
    logger.debug(f"Loaded problem with keys {sorted(data)}")
    return data


def build_arguments(kind: ProblemKind, data: Dict[str, Any],
                    method: Optional[str] = None) -> Tuple[tuple, Dict[str, Any]]:
    """
    Positional and keyword arguments for the dispatch entry point of kind.

    A method given on the command line overrides the one in the file.
    """
    if kind is ProblemKind.TRANSPORTATION:
        return (method or data.get("method", "modi"), data.get("cost"),
                data.get("supply"), data.get("demand")), {}

    if kind is ProblemKind.ASSIGNMENT:
        return (data.get("agents"), data.get("tasks"), data.get("cost", data.get("costMatrix"))), {}

    if kind is ProblemKind.LINEAR_PROGRAMMING:
        objective = data.get("objective")
        variables = data.get("variables", len(objective) if objective else None)
        maximize = data.get("maximize", data.get("objectiveType", "max") == "max")
        return (method or data.get("method", "graph"), variables, objective,
                maximize, data.get("constraints", [])), {}

    if kind is ProblemKind.NETWORK_FLOW:
        return (data.get("activities", []),), {}

    raise ProblemFileError(f"Unsupported problem kind: {kind}")
