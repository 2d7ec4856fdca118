from typing import List, Literal

from pydantic import BaseModel


# Request schemas
class AssistantMessageCreate(BaseModel):
    strategy_id: str
    message: str


# Response schemas
class ChatMessageResponse(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class AssistantReplyResponse(BaseModel):
    reply: ChatMessageResponse
    messages: List[ChatMessageResponse]
