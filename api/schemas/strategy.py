"""Pydantic schemas for the teaching strategy catalog."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class StrategyType(str, Enum):
    WARM_UP_POLL = "Warm-Up Poll"
    CURIOSITY_TRIGGER = "Curiosity Trigger"
    THINK_PAIR_SHARE = "Think-Pair-Share"
    SELF_REFLECTION = "Self-Reflection"


class CatalogModel(BaseModel):
    """Catalog entries are loaded once and never mutated."""

    model_config = ConfigDict(frozen=True)


class StepRecord(CatalogModel):
    phase: str
    action: str
    time: Optional[str] = None
    goal: Optional[str] = None
    ai_tip: Optional[str] = None  # Facilitation tip shown beside the action
    prompt: Optional[str] = None  # Speaker notes, split into lines on ". "


class DisciplineExample(CatalogModel):
    discipline: str
    example: str
    practice_link: Optional[str] = None


class StrategyRecord(CatalogModel):
    id: StrategyType
    purpose: str
    total_time: str
    flow: List[StepRecord]
    tips: List[str]
    mistakes: Optional[List[str]] = None
    tools: Optional[str] = None
    tool_link: Optional[str] = None
    extra_content: Optional[str] = None
    demo_image: Optional[str] = None
    demo_caption: Optional[str] = None
    reflection_prompts: Optional[List[str]] = None
    discipline_examples: Optional[List[DisciplineExample]] = None
    instructional_note: Optional[str] = None


# Response schemas
class StrategySummary(BaseModel):
    id: StrategyType
    purpose: str
    total_time: str
