from typing import List

from fastapi import APIRouter, HTTPException

from api.schemas.strategy import StrategyRecord, StrategySummary
from api.services.strategy_catalog import UnknownStrategyError, get_strategy, list_strategies

router = APIRouter()


@router.get("/", response_model=List[StrategySummary])
def get_strategies():
    """List the four teaching strategies."""
    return [
        StrategySummary(id=s.id, purpose=s.purpose, total_time=s.total_time)
        for s in list_strategies()
    ]


@router.get("/{strategy_id}", response_model=StrategyRecord)
def get_strategy_detail(strategy_id: str):
    """Get the full facilitation guide for one strategy."""
    try:
        return get_strategy(strategy_id)
    except UnknownStrategyError:
        raise HTTPException(status_code=404, detail="Strategy not found")
