import pytest
from pydantic import ValidationError

from api.schemas.strategy import StrategyType
from api.services.strategy_catalog import (
    DEFAULT_TOOL_LABEL,
    UnknownStrategyError,
    get_strategy,
    instructor_reflection_prompts,
    list_strategies,
    overview_text,
    recommended_tool,
    speaker_lines,
    strategy_ids,
)


def test_catalog_has_four_strategies_in_order():
    assert strategy_ids() == [
        "Warm-Up Poll",
        "Curiosity Trigger",
        "Think-Pair-Share",
        "Self-Reflection",
    ]
    assert [s.id for s in list_strategies()] == list(StrategyType)


def test_get_strategy_by_string_and_enum():
    assert get_strategy("Think-Pair-Share") is get_strategy(StrategyType.THINK_PAIR_SHARE)
    assert get_strategy("Think-Pair-Share").total_time == "10 minutes"


def test_unknown_strategy_raises():
    with pytest.raises(UnknownStrategyError):
        get_strategy("Jigsaw")


def test_catalog_records_are_frozen():
    record = get_strategy("Self-Reflection")
    with pytest.raises(ValidationError):
        record.purpose = "changed"


def test_every_strategy_has_flow_and_tips():
    for record in list_strategies():
        assert record.flow
        assert record.tips
        assert all(step.phase and step.action for step in record.flow)


def test_speaker_lines_split_and_terminate_with_period():
    lines = speaker_lines("Take 30 seconds for this one. Speed and accuracy both count for the leaderboard!")
    assert lines == [
        "Take 30 seconds for this one.",
        "Speed and accuracy both count for the leaderboard!.",
    ]


def test_speaker_lines_keep_existing_period():
    assert speaker_lines("One. Two.") == ["One.", "Two."]
    assert speaker_lines("") == []


def test_overview_prefers_instructional_note():
    tps = get_strategy("Think-Pair-Share")
    assert overview_text(tps) == tps.instructional_note


def test_recommended_tool_defaults():
    assert recommended_tool(get_strategy("Warm-Up Poll")) == "Mentimeter"
    assert recommended_tool(get_strategy("Think-Pair-Share")) == DEFAULT_TOOL_LABEL


def test_instructor_reflection_prompts_capped_at_three():
    prompts = instructor_reflection_prompts(get_strategy("Warm-Up Poll"))
    assert len(prompts) == 3
    assert prompts[0] == "What emotional tone did this activity set for your class?"
