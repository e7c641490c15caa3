from datetime import datetime, timezone
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from models import SavedInputs

FIELDS = ("install_width", "board_width", "joint_width", "min_board_width")


async def get_saved_inputs(db: AsyncSession, session_id: str):
    """Retrieve the stored form inputs for a session."""
    result = await db.execute(select(SavedInputs).where(SavedInputs.session_id == session_id))
    return result.scalars().first()


async def save_inputs(db: AsyncSession, session_id: str, data: dict):
    """Create or overwrite the stored form inputs for a session."""
    row = await get_saved_inputs(db, session_id)
    if row is None:
        row = SavedInputs(session_id=session_id)
        db.add(row)

    for name in FIELDS:
        value = data.get(name)
        setattr(row, name, float(value) if value is not None else None)
    row.edge_joints = bool(data.get('edge_joints', True))
    row.updated_at = datetime.now(timezone.utc)

    await db.flush()
    await db.commit()
    await db.refresh(row)
    return row


async def delete_saved_inputs(db: AsyncSession, session_id: str) -> bool:
    """Forget a session's inputs. Returns False if nothing was stored."""
    row = await get_saved_inputs(db, session_id)
    if row is None:
        return False
    await db.delete(row)
    await db.commit()
    return True


def saved_inputs_to_json(row: SavedInputs) -> dict:
    """Convert a SavedInputs row to the calculator form shape."""
    return {
        "install_width": row.install_width,
        "board_width": row.board_width,
        "joint_width": row.joint_width,
        "min_board_width": row.min_board_width,
        "edge_joints": bool(row.edge_joints),
    }
