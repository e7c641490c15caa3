"""SQLAlchemy ORM models."""

from datetime import datetime, timezone
from sqlalchemy import Column, String, Float, Boolean, DateTime
from database import Base


class SavedInputs(Base):
    """Last-used calculator form values, keyed by client session."""
    __tablename__ = "saved_inputs"

    session_id = Column(String, primary_key=True)
    install_width = Column(Float, nullable=True)
    board_width = Column(Float, nullable=True)
    joint_width = Column(Float, nullable=True)
    min_board_width = Column(Float, nullable=True)
    edge_joints = Column(Boolean, nullable=False, default=True)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
