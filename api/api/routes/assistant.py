from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from api.core.dependencies import get_chat_session
from api.schemas.assistant import AssistantMessageCreate, AssistantReplyResponse, ChatMessageResponse
from api.services.strategy_catalog import UnknownStrategyError, get_strategy
from workflows.assistant import ChatSession

router = APIRouter()


def _serialize(chat: ChatSession) -> List[ChatMessageResponse]:
    return [ChatMessageResponse(role=m.role, content=m.content) for m in chat.messages]


@router.get("/messages", response_model=List[ChatMessageResponse])
def get_messages(chat: ChatSession = Depends(get_chat_session)):
    """Get the current conversation."""
    return _serialize(chat)


@router.delete("/messages", status_code=status.HTTP_204_NO_CONTENT)
def clear_messages(chat: ChatSession = Depends(get_chat_session)):
    """Start a fresh conversation."""
    chat.clear()


@router.post("/messages", response_model=AssistantReplyResponse)
def send_message(request: AssistantMessageCreate, chat: ChatSession = Depends(get_chat_session)):
    """
    Ask the assistant about the active strategy.
    - 400: blank message
    - 409: a previous message is still being answered
    """
    try:
        strategy = get_strategy(request.strategy_id)
    except UnknownStrategyError:
        raise HTTPException(status_code=404, detail="Strategy not found")

    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    reply = chat.submit(request.message, strategy)
    if reply is None:
        raise HTTPException(status_code=409, detail="Assistant is still answering the previous message")

    return AssistantReplyResponse(
        reply=ChatMessageResponse(role=reply.role, content=reply.content),
        messages=_serialize(chat),
    )
