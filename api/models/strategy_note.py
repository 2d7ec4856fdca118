from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from api.core.database import Base


class StrategyNote(Base):
    """One row per strategy holding the instructor's saved question and reflection."""

    __tablename__ = "polaris_persistence"

    id = Column(Integer, primary_key=True, index=True)
    strategy_id = Column(String(64), nullable=False, unique=True, index=True)
    question = Column(Text, nullable=True)
    reflection = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
