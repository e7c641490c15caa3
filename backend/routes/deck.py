"""
Deck Board Layout API Route.

Endpoints:
  GET  /api/deck/defaults   : Initial form values and usage notes
  POST /api/deck/calculate  : Ranked board layout plans
  POST /api/deck/summary    : Share text for the recommended plan
"""

import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from schemas import LayoutRequest, LayoutResponse, SummaryResponse, DefaultsResponse
from services.deck_layout import (
    InvalidLayoutInput,
    LayoutInput,
    compute_layout_for,
    WIDTH_STEP,
)
from services.plan_format import plan_cards, result_message, share_summary, USAGE_NOTES
from services.saved_inputs import save_inputs
from config import DEFAULT_INPUTS, MAX_TOTAL_BOARDS, MAX_RESULTS, SHARE_ATTRIBUTION

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/deck", tags=["deck"])


def _layout_input(req: LayoutRequest) -> LayoutInput:
    try:
        return LayoutInput.from_values(
            req.install_width,
            req.board_width,
            req.joint_width,
            req.min_board_width,
            req.edge_joints,
        )
    except InvalidLayoutInput as e:
        raise HTTPException(status_code=400, detail=str(e))


# ---------- Endpoints ----------

@router.get("/defaults", response_model=DefaultsResponse)
async def deck_defaults():
    """Initial calculator values, search limits and usage notes."""
    return DefaultsResponse(
        inputs=DEFAULT_INPUTS,
        max_total_boards=MAX_TOTAL_BOARDS,
        max_results=MAX_RESULTS,
        width_step=WIDTH_STEP,
        usage=USAGE_NOTES,
    )


@router.post("/calculate", response_model=LayoutResponse)
async def deck_calculate(req: LayoutRequest, db: AsyncSession = Depends(get_db)):
    """
    Compute board layout plans.

    An empty plan list is a normal answer: no combination of up to
    MAX_TOTAL_BOARDS boards fits the width and minimum trim constraints.
    """
    layout = _layout_input(req)
    try:
        candidates = compute_layout_for(layout, MAX_TOTAL_BOARDS, MAX_RESULTS)
    except Exception as e:
        logger.error(f"Layout calculation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    if req.session_id:
        try:
            await save_inputs(db, req.session_id, req.dict())
        except Exception as e:
            logger.warning(f"Saving inputs for session {req.session_id} failed: {e}")

    return LayoutResponse(
        count=len(candidates),
        message=result_message(candidates),
        candidates=[c.to_dict() for c in candidates],
        plans=plan_cards(candidates, layout.board_width),
        input=req.dict(exclude={"session_id"}),
    )


@router.post("/summary", response_model=SummaryResponse)
async def deck_summary(req: LayoutRequest):
    """Share text for the top-ranked plan."""
    layout = _layout_input(req)
    candidates = compute_layout_for(layout, MAX_TOTAL_BOARDS, MAX_RESULTS)
    if not candidates:
        raise HTTPException(status_code=404, detail=result_message(candidates))

    best = candidates[0]
    return SummaryResponse(
        summary=share_summary(best, layout, SHARE_ATTRIBUTION),
        candidate=best.to_dict(),
    )
