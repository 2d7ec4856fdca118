# Import all models here so Base.metadata is complete for Alembic
from api.models.strategy_note import StrategyNote

__all__ = [
    "StrategyNote",
]
