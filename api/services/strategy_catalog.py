"""Lookup helpers over the compiled-in strategy catalog."""

from typing import Dict, List, Union

from api.content.strategies import STRATEGIES
from api.schemas.strategy import StrategyRecord, StrategyType

DEFAULT_TOOL_LABEL = "Classroom Presentation"
SPEAKER_LINE_DELIMITER = ". "

_BY_ID: Dict[str, StrategyRecord] = {record.id.value: record for record in STRATEGIES}


class UnknownStrategyError(KeyError):
    """Raised when a strategy identifier is not one of the four catalog entries."""


def list_strategies() -> List[StrategyRecord]:
    return list(STRATEGIES)


def strategy_ids() -> List[str]:
    return [record.id.value for record in STRATEGIES]


def get_strategy(strategy_id: Union[str, StrategyType]) -> StrategyRecord:
    key = strategy_id.value if isinstance(strategy_id, StrategyType) else strategy_id
    try:
        return _BY_ID[key]
    except KeyError:
        raise UnknownStrategyError(key) from None


def speaker_lines(prompt: str) -> List[str]:
    """Split speaker notes into the discrete lines an instructor reads aloud.

    Every line ends with a period; the delimiter split drops it from all
    but the last sentence.
    """
    if not prompt:
        return []
    lines = []
    for sentence in prompt.split(SPEAKER_LINE_DELIMITER):
        lines.append(sentence if sentence.endswith(".") else f"{sentence}.")
    return lines


def overview_text(strategy: StrategyRecord) -> str:
    return strategy.instructional_note or strategy.purpose


def recommended_tool(strategy: StrategyRecord) -> str:
    return strategy.tools or DEFAULT_TOOL_LABEL


def instructor_reflection_prompts(strategy: StrategyRecord, limit: int = 3) -> List[str]:
    return list(strategy.reflection_prompts or [])[:limit]
