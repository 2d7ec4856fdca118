"""
Strategy Assistant workflow.

Answers one instructor question at a time about the active strategy, grounded
only in that strategy's catalog entry and the delivery guide. Each call is
stateless: prior turns are kept for display but never sent to the model.
Any failure becomes a fixed in-conversation reply; nothing is retried.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Any, List, Literal, Optional

from langchain_core.messages import HumanMessage, SystemMessage

from api.content.reference_guide import REFERENCE_GUIDE
from api.core.config import Settings, get_settings
from api.schemas.strategy import StrategyRecord
from workflows.llm_utils import get_assistant_llm, invoke_llm_with_metrics
from workflows.prompts.assistant_prompts import (
    ASSISTANT_ERROR_FALLBACK,
    ASSISTANT_NOT_FOUND_FALLBACK,
    ASSISTANT_SYSTEM_PROMPT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    role: Literal["user", "assistant"]
    content: str


def build_system_instruction(strategy: StrategyRecord, reference_text: str = REFERENCE_GUIDE) -> str:
    return ASSISTANT_SYSTEM_PROMPT.format(
        strategy_data=strategy.model_dump_json(exclude_none=True),
        reference_text=reference_text,
        strategy_id=strategy.id.value,
    )


class AssistantGateway:
    """Single request/response bridge to the hosted chat model."""

    def __init__(
        self,
        llm: Any = None,
        model_name: Optional[str] = None,
        settings: Optional[Settings] = None,
        reference_text: str = REFERENCE_GUIDE,
    ):
        self._llm = llm
        self._model_name = model_name
        self._settings = settings
        self._reference_text = reference_text

    def _resolve_llm(self):
        if self._llm is None:
            self._llm, self._model_name = get_assistant_llm(self._settings or get_settings())
        return self._llm, self._model_name or "unknown"

    def answer(self, message: str, strategy: StrategyRecord) -> str:
        try:
            llm, model_name = self._resolve_llm()
        except Exception as e:
            logger.exception(f"Assistant LLM could not be created: {e}")
            return ASSISTANT_ERROR_FALLBACK
        if llm is None:
            logger.warning("Assistant called without an LLM API key configured")
            return ASSISTANT_ERROR_FALLBACK

        messages = [
            SystemMessage(content=build_system_instruction(strategy, self._reference_text)),
            HumanMessage(content=message),
        ]
        response = invoke_llm_with_metrics(llm, messages, model_name)
        if not response.success:
            return ASSISTANT_ERROR_FALLBACK

        logger.info(
            "Assistant answered for %s: %d tokens, $%.6f, %.3fs",
            strategy.id.value,
            response.metrics.total_tokens,
            response.metrics.estimated_cost_usd,
            response.metrics.execution_time_seconds,
        )
        return response.content or ASSISTANT_NOT_FOUND_FALLBACK


class ChatSession:
    """In-memory conversation with a single-flight gate.

    While one call is outstanding further submissions are rejected outright:
    no queueing and no cancellation of the call in flight.
    """

    def __init__(self, gateway: AssistantGateway):
        self._gateway = gateway
        self._messages: List[ChatMessage] = []
        self._messages_lock = threading.Lock()
        self._gate = threading.Lock()

    @property
    def messages(self) -> List[ChatMessage]:
        with self._messages_lock:
            return list(self._messages)

    @property
    def is_busy(self) -> bool:
        return self._gate.locked()

    def submit(self, text: str, strategy: StrategyRecord) -> Optional[ChatMessage]:
        """Send one message; returns the assistant reply, or None if rejected."""
        message = (text or "").strip()
        if not message:
            return None
        if not self._gate.acquire(blocking=False):
            logger.info("Assistant busy; rejected a new message")
            return None

        try:
            self._append(ChatMessage(role="user", content=message))
            reply = ChatMessage(role="assistant", content=self._gateway.answer(message, strategy))
            self._append(reply)
            return reply
        finally:
            self._gate.release()

    def clear(self) -> None:
        with self._messages_lock:
            self._messages.clear()

    def _append(self, message: ChatMessage) -> None:
        with self._messages_lock:
            self._messages.append(message)
