"""Display cards and share text for computed deck layout plans."""

from typing import Dict, List, Optional

from services.deck_layout import Candidate, LayoutInput

NO_PLAN_MESSAGE = (
    "No layout found. Review the install width or the minimum board width."
)

USAGE_NOTES = [
    "Install width: overall width of the deck",
    "Board width: width of an uncut standard board (e.g. 150, 105)",
    "Joint width: gap between boards (e.g. 5)",
    "Minimum board width: narrowest acceptable trim board after cutting",
    "Edge joints: also leave a joint gap against walls or frames at both ends",
    "Trim board widths are calculated in steps of 0.5",
    "Plans are listed with the fewest trim boards first, widest trim first",
]

DEFAULT_ATTRIBUTION = "Powered by LASCO JAPAN Co., Ltd. https://lasco.jp/"


def _num(value: float) -> str:
    """Format a width without a trailing .0 (150.0 -> 150, 97.5 -> 97.5)."""
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def result_message(candidates: List[Candidate]) -> str:
    if not candidates:
        return NO_PLAN_MESSAGE
    n = len(candidates)
    return f"{n} plan{'s' if n != 1 else ''} found"


def plan_cards(candidates: List[Candidate], board_width: float) -> List[Dict]:
    """Turn ranked candidates into the cards the form renders."""
    cards = []
    for i, cand in enumerate(candidates):
        cards.append({
            "rank": i + 1,
            "label": f"Plan {i + 1}",
            "recommended": i == 0,
            "standard": {
                "count": cand.standard_boards,
                "width": board_width,
                "text": f"{_num(board_width)} x {cand.standard_boards}",
            },
            "trim": {
                "count": cand.adjusted_boards,
                "width": cand.adjusted_width,
                "text": f"{_num(cand.adjusted_width)} x {cand.adjusted_boards}",
            },
            "total_boards": cand.total_boards,
            "cut_width": cand.width_diff,
            "total_width": cand.total_width,
        })
    return cards


def share_summary(candidate: Candidate, layout: LayoutInput,
                  attribution: Optional[str] = None) -> str:
    """
    Human-readable summary of the recommended plan, ready to paste into
    a message or the clipboard. Ends with the attribution line.
    """
    edge = "yes" if layout.edge_joints else "no"
    lines = [
        "[Deck board layout]",
        f"Install width: {_num(layout.install_width)}",
        f"Board width: {_num(layout.board_width)}  "
        f"Joint width: {_num(layout.joint_width)}  Edge joints: {edge}",
        "",
        f"Standard boards: {candidate.standard_boards} "
        f"({_num(layout.board_width)} x {candidate.standard_boards})",
        f"Trim boards: {candidate.adjusted_boards} "
        f"({_num(candidate.adjusted_width)} x {candidate.adjusted_boards})",
        f"Total boards: {candidate.total_boards}",
        f"Cut width: -{_num(candidate.width_diff)}",
        f"Actual install width: {_num(candidate.total_width)}",
        "",
        attribution or DEFAULT_ATTRIBUTION,
    ]
    return "\n".join(lines)
