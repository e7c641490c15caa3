"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


# ---------- Layout calculation ----------
class LayoutRequest(BaseModel):
    install_width: float = Field(..., description="Overall width to cover")
    board_width: float = Field(..., description="Width of an uncut standard board")
    joint_width: float = Field(..., description="Gap between boards")
    min_board_width: float = Field(..., description="Narrowest acceptable trim board")
    edge_joints: bool = Field(default=True, description="Also leave joints at both outer edges")
    session_id: Optional[str] = Field(
        default=None, description="If set, the inputs are remembered for this session"
    )


class CandidateOut(BaseModel):
    totalBoards: int
    standardBoards: int
    adjustedBoards: int
    adjustedWidth: float
    widthDiff: float
    totalWidth: float


class LayoutResponse(BaseModel):
    count: int
    message: str
    candidates: list[CandidateOut] = []
    plans: list[dict] = []
    input: dict


class SummaryResponse(BaseModel):
    summary: str
    candidate: CandidateOut


class DefaultsResponse(BaseModel):
    inputs: dict
    max_total_boards: int
    max_results: int
    width_step: float
    usage: list[str] = []


# ---------- Saved inputs ----------
class SavedInputsIn(BaseModel):
    install_width: Optional[float] = None
    board_width: Optional[float] = None
    joint_width: Optional[float] = None
    min_board_width: Optional[float] = None
    edge_joints: bool = True


class SavedInputsOut(BaseModel):
    session_id: str
    install_width: Optional[float]
    board_width: Optional[float]
    joint_width: Optional[float]
    min_board_width: Optional[float]
    edge_joints: bool = True
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
