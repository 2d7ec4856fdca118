from enum import Enum
from typing import Dict, Literal

from pydantic import BaseModel


class NoteField(str, Enum):
    question = "question"
    reflection = "reflection"


# Request schemas
class NoteTextUpdate(BaseModel):
    text: str = ""


# Response schemas
class NotesSnapshotResponse(BaseModel):
    hydrated: bool
    remote_enabled: bool
    questions: Dict[str, str]
    reflections: Dict[str, str]


class NoteResponse(BaseModel):
    strategy_id: str
    question: str
    reflection: str
    question_saved: bool
    reflection_saved: bool


class SaveResponse(BaseModel):
    """Result of an explicit save; `acknowledged` mirrors the transient saved flag."""
    strategy_id: str
    field: NoteField
    remote_synced: bool
    storage: Literal["cloud", "local"]
    acknowledged: bool
