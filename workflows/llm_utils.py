"""
Shared LLM utilities for the strategy assistant.

Provides:
- LLM initialization from configured API keys
- Invocation with token/cost/latency metrics
- Cost calculation for OpenAI and Anthropic
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from langchain_core.messages import BaseMessage

from api.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


# Cost per 1M tokens (as of Jan 2025)
COST_PER_1M_TOKENS = {
    "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    "gpt-4o": {"input": 2.50, "output": 10.00},
    "claude-3-haiku-20240307": {"input": 0.25, "output": 1.25},
    "claude-3-5-sonnet-20241022": {"input": 3.00, "output": 15.00},
}

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_ANTHROPIC_MODEL = "claude-3-haiku-20240307"


@dataclass
class LLMMetrics:
    """Metrics from LLM invocation."""
    model_name: str = ""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    estimated_cost_usd: float = 0.0
    execution_time_seconds: float = 0.0
    error_message: Optional[str] = None


@dataclass
class LLMResponse:
    """Response from LLM invocation with metrics."""
    content: Optional[str] = None
    metrics: LLMMetrics = field(default_factory=LLMMetrics)
    success: bool = False


def get_assistant_llm(settings: Optional[Settings] = None) -> Tuple[Any, Optional[str]]:
    """
    Get the assistant LLM based on available API keys.

    Uses a low temperature so answers stay literal to the supplied guide.

    Returns:
        Tuple of (llm_instance, model_name) or (None, None) if no keys available
    """
    settings = settings or get_settings()

    if settings.openai_api_key:
        from langchain_openai import ChatOpenAI
        model_name = settings.assistant_model or DEFAULT_OPENAI_MODEL
        return ChatOpenAI(
            model=model_name,
            api_key=settings.openai_api_key,
            temperature=settings.assistant_temperature,
        ), model_name
    elif settings.anthropic_api_key:
        from langchain_anthropic import ChatAnthropic
        model_name = settings.assistant_model or DEFAULT_ANTHROPIC_MODEL
        return ChatAnthropic(
            model=model_name,
            api_key=settings.anthropic_api_key,
            temperature=settings.assistant_temperature,
        ), model_name
    else:
        return None, None


def calculate_cost(model_name: str, prompt_tokens: int, completion_tokens: int) -> float:
    """Calculate estimated cost in USD for token usage."""
    if model_name not in COST_PER_1M_TOKENS:
        # Default to gpt-4o-mini pricing if unknown
        model_name = DEFAULT_OPENAI_MODEL

    costs = COST_PER_1M_TOKENS[model_name]
    input_cost = (prompt_tokens / 1_000_000) * costs["input"]
    output_cost = (completion_tokens / 1_000_000) * costs["output"]
    return round(input_cost + output_cost, 6)


def estimate_tokens(text: str) -> int:
    """
    Estimate token count for text.
    Rough estimate: ~4 characters per token for English text.
    """
    if not text:
        return 0
    return len(text) // 4


def response_text(content: Any) -> str:
    """Flatten a chat model's content (string or list of content blocks) to text."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts: List[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def invoke_llm_with_metrics(llm, messages: Sequence[BaseMessage], model_name: str) -> LLMResponse:
    """
    Invoke LLM and return response with metrics.

    Args:
        llm: LangChain chat model instance
        messages: System and user messages to send
        model_name: Name of the model for cost calculation

    Returns:
        LLMResponse with content and metrics; never raises
    """
    metrics = LLMMetrics(model_name=model_name)
    start_time = time.time()
    prompt_text = "\n".join(response_text(m.content) for m in messages)

    try:
        response = llm.invoke(list(messages))
        metrics.execution_time_seconds = round(time.time() - start_time, 3)
        content = response_text(response.content)

        # Extract token usage if available
        if hasattr(response, 'response_metadata'):
            metadata = response.response_metadata or {}
            # OpenAI format
            if 'token_usage' in metadata:
                usage = metadata['token_usage'] or {}
                metrics.prompt_tokens = usage.get('prompt_tokens', 0)
                metrics.completion_tokens = usage.get('completion_tokens', 0)
                metrics.total_tokens = usage.get('total_tokens', 0)
            # Anthropic format
            elif 'usage' in metadata:
                usage = metadata['usage'] or {}
                metrics.prompt_tokens = usage.get('input_tokens', 0)
                metrics.completion_tokens = usage.get('output_tokens', 0)
                metrics.total_tokens = metrics.prompt_tokens + metrics.completion_tokens

        # If no token info from API, estimate
        if metrics.total_tokens == 0:
            metrics.prompt_tokens = estimate_tokens(prompt_text)
            metrics.completion_tokens = estimate_tokens(content)
            metrics.total_tokens = metrics.prompt_tokens + metrics.completion_tokens

        metrics.estimated_cost_usd = calculate_cost(
            model_name, metrics.prompt_tokens, metrics.completion_tokens
        )

        return LLMResponse(
            content=content,
            metrics=metrics,
            success=True
        )

    except Exception as e:
        metrics.execution_time_seconds = round(time.time() - start_time, 3)
        metrics.error_message = str(e)
        logger.exception(f"LLM invocation failed: {e}")
        return LLMResponse(
            content=None,
            metrics=metrics,
            success=False
        )
