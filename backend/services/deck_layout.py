"""
Deck Board Layout Solver.

Covers a fixed install width with full-width (standard) boards plus one
evenly cut trim width, leaving a joint gap between boards and optionally
at both outer edges.

For every total board count up to the search cap and every trim board
count within it, the leftover width is spread over the trim boards and
snapped to 0.5 units. Plans whose trim width falls inside
[min_board_width, board_width] are kept, ranked by fewest trim boards then
widest trim, and reduced to one plan per trim board count.

The solver is a pure function. Callers validate input first with
``validate_layout_input``; the solver itself trusts its arguments.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOTAL_BOARDS = 30
DEFAULT_MAX_RESULTS = 5
WIDTH_STEP = 0.5


class InvalidLayoutInput(ValueError):
    """Raised when layout parameters are missing or out of range."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


@dataclass(frozen=True)
class LayoutInput:
    install_width: float
    board_width: float
    joint_width: float
    min_board_width: float
    edge_joints: bool = True

    @classmethod
    def from_values(cls, install_width, board_width, joint_width,
                    min_board_width, edge_joints=True) -> "LayoutInput":
        """Validate raw values and build an input object."""
        values = validate_layout_input(
            install_width, board_width, joint_width, min_board_width,
        )
        return cls(*values, edge_joints=bool(edge_joints))


@dataclass(frozen=True)
class Candidate:
    total_boards: int
    standard_boards: int
    adjusted_boards: int
    adjusted_width: float
    width_diff: float
    total_width: float

    def to_dict(self) -> Dict:
        return {
            "totalBoards": self.total_boards,
            "standardBoards": self.standard_boards,
            "adjustedBoards": self.adjusted_boards,
            "adjustedWidth": self.adjusted_width,
            "widthDiff": self.width_diff,
            "totalWidth": self.total_width,
        }


def round_half(value: float) -> float:
    """
    Round *value* to the nearest multiple of 0.5.

    The value is doubled and rounded half away from zero, so 123.75
    becomes 124.0 and -0.25 becomes -0.5 on every platform (Python's
    built-in ``round`` would round half to even instead).
    """
    doubled = value / WIDTH_STEP
    return math.copysign(math.floor(abs(doubled) + 0.5), doubled) * WIDTH_STEP


def _as_number(value, field: str) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidLayoutInput(f"{field} is required", field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidLayoutInput(f"{field} must be a number, got {value!r}", field)
    if not math.isfinite(number):
        raise InvalidLayoutInput(f"{field} must be finite", field)
    return number


def validate_layout_input(install_width, board_width, joint_width, min_board_width):
    """
    Check raw layout parameters and return them as floats.

    Returns
    -------
    tuple
        ``(install_width, board_width, joint_width, min_board_width)``

    Raises
    ------
    InvalidLayoutInput
        If a value is missing, not numeric, or outside its range.
    """
    install = _as_number(install_width, "install_width")
    board = _as_number(board_width, "board_width")
    joint = _as_number(joint_width, "joint_width")
    min_board = _as_number(min_board_width, "min_board_width")

    if install <= 0:
        raise InvalidLayoutInput("install_width must be greater than 0", "install_width")
    if board <= 0:
        raise InvalidLayoutInput("board_width must be greater than 0", "board_width")
    if joint < 0:
        raise InvalidLayoutInput("joint_width must not be negative", "joint_width")
    if min_board <= 0:
        raise InvalidLayoutInput("min_board_width must be greater than 0", "min_board_width")
    if min_board > board:
        raise InvalidLayoutInput(
            "min_board_width is larger than board_width", "min_board_width",
        )
    return install, board, joint, min_board


def joint_count(total_boards: int, edge_joints: bool) -> int:
    """Number of joints for *total_boards* boards laid side by side."""
    return total_boards + 1 if edge_joints else total_boards - 1


def enumerate_candidates(
    install_width: float,
    board_width: float,
    joint_width: float,
    min_board_width: float,
    edge_joints: bool,
    max_total_boards: int = DEFAULT_MAX_TOTAL_BOARDS,
) -> List[Candidate]:
    """Every feasible plan up to *max_total_boards*, in search order."""
    found: List[Candidate] = []
    for total_boards in range(1, max_total_boards + 1):
        total_joint_width = joint_count(total_boards, edge_joints) * joint_width
        available_width = install_width - total_joint_width

        for adjusted_boards in range(1, total_boards + 1):
            standard_boards = total_boards - adjusted_boards
            remaining_width = available_width - standard_boards * board_width
            adjusted_width = round_half(remaining_width / adjusted_boards)

            if not (min_board_width <= adjusted_width <= board_width):
                continue

            found.append(Candidate(
                total_boards=total_boards,
                standard_boards=standard_boards,
                adjusted_boards=adjusted_boards,
                adjusted_width=adjusted_width,
                width_diff=round_half(board_width - adjusted_width),
                total_width=round_half(
                    standard_boards * board_width
                    + adjusted_boards * adjusted_width
                    + total_joint_width
                ),
            ))
    return found


def rank_candidates(candidates: List[Candidate],
                    max_results: int = DEFAULT_MAX_RESULTS) -> List[Candidate]:
    """
    Order plans by fewest trim boards, then widest trim board, keep the
    best plan per trim board count and cut the list to *max_results*.
    """
    ordered = sorted(candidates, key=lambda c: (c.adjusted_boards, -c.adjusted_width))

    best: List[Candidate] = []
    seen = set()
    for cand in ordered:
        if cand.adjusted_boards in seen:
            continue
        seen.add(cand.adjusted_boards)
        best.append(cand)
    return best[:max_results]


def compute_layout(
    install_width: float,
    board_width: float,
    joint_width: float,
    min_board_width: float,
    edge_joints: bool = True,
    max_total_boards: int = DEFAULT_MAX_TOTAL_BOARDS,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[Candidate]:
    """
    Compute the ranked board layout plans for an install width.

    An empty list means no plan within *max_total_boards* boards gives a
    trim width between *min_board_width* and *board_width*.
    """
    candidates = enumerate_candidates(
        install_width, board_width, joint_width, min_board_width,
        edge_joints, max_total_boards,
    )
    result = rank_candidates(candidates, max_results)
    logger.debug(
        f"Layout W={install_width} B={board_width} J={joint_width} "
        f"Bmin={min_board_width} edge={edge_joints}: "
        f"{len(candidates)} feasible, {len(result)} returned"
    )
    return result


def compute_layout_for(layout: LayoutInput,
                       max_total_boards: int = DEFAULT_MAX_TOTAL_BOARDS,
                       max_results: int = DEFAULT_MAX_RESULTS) -> List[Candidate]:
    """Run ``compute_layout`` with the fields of a validated ``LayoutInput``."""
    return compute_layout(
        max_total_boards=max_total_boards,
        max_results=max_results,
        **asdict(layout),
    )
