from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from database import get_db
from services.saved_inputs import (
    delete_saved_inputs,
    get_saved_inputs,
    save_inputs,
    saved_inputs_to_json,
)
from schemas import SavedInputsIn, SavedInputsOut

router = APIRouter(prefix="/api/deck", tags=["saved-inputs"])


@router.put('/inputs/{session_id}', response_model=SavedInputsOut)
async def put_inputs(session_id: str, req: SavedInputsIn, db: AsyncSession = Depends(get_db)):
    """Remember the calculator form values for a session."""
    try:
        row = await save_inputs(db, session_id, req.dict())
        return row
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get('/inputs/{session_id}', response_model=SavedInputsOut)
async def get_inputs(session_id: str, db: AsyncSession = Depends(get_db)):
    """Retrieve the last-used form values for a session."""
    row = await get_saved_inputs(db, session_id)
    if not row:
        raise HTTPException(status_code=404, detail="No saved inputs for this session")
    return row


@router.get('/inputs/{session_id}/json')
async def get_inputs_json(session_id: str, db: AsyncSession = Depends(get_db)):
    """Saved inputs in the exact shape of the calculate request body."""
    row = await get_saved_inputs(db, session_id)
    if not row:
        raise HTTPException(status_code=404, detail="No saved inputs for this session")
    return JSONResponse(content=saved_inputs_to_json(row))


@router.delete('/inputs/{session_id}')
async def delete_inputs(session_id: str, db: AsyncSession = Depends(get_db)):
    """Forget the saved form values for a session."""
    deleted = await delete_saved_inputs(db, session_id)
    return {"deleted": deleted}
