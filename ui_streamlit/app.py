"""
Polaris Streamlit UI

Instructor interface for:
- Strategy guide: purpose, timing, step-by-step flow with speaker notes, tips and pitfalls
- Question creator: draft and save the core question for each strategy
- Reflection: post-activity prompts and a saved reflection note
- Strategy assistant: questions answered only from the bundled guide
"""
from urllib.parse import quote

import httpx
import streamlit as st

from api.core.config import get_settings
from api.services.message_render import render_message, to_markdown
from api.services.strategy_catalog import (
    instructor_reflection_prompts,
    overview_text,
    recommended_tool,
    speaker_lines,
)
from api.schemas.strategy import StrategyRecord, StrategyType
from ui_streamlit.notes_sync import fetch_note, push_draft, save_note, saved_banner
from workflows.prompts.assistant_prompts import QUICK_QUESTIONS

settings = get_settings()
API_URL = settings.api_url

st.set_page_config(page_title="Polaris 2.0", page_icon="🧭", layout="wide")


# ============ API HELPERS ============

def api_get(endpoint: str):
    """Make GET request to API."""
    try:
        response = httpx.get(f"{API_URL}/api{endpoint}", timeout=30.0, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        st.error(f"API Error: {e}")
        return None


def api_post(endpoint: str, data: dict = None, timeout: float = 30.0):
    """Make POST request to API."""
    try:
        response = httpx.post(f"{API_URL}/api{endpoint}", json=data, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 409:
            st.info("The assistant is still answering your previous question.")
        else:
            st.error(f"API Error: {e}")
        return None
    except httpx.HTTPError as e:
        st.error(f"API Error: {e}")
        return None


@st.cache_resource
def notes_client() -> httpx.Client:
    return httpx.Client(base_url=f"{API_URL}/api", timeout=30.0)


def note_key(strategy_id: str, field: str) -> str:
    return f"{field}-{strategy_id}"


def on_note_edit(strategy_id: str, field: str):
    """Push the draft so the server's local cache holds it before any save."""
    try:
        push_draft(notes_client(), strategy_id, field, st.session_state[note_key(strategy_id, field)])
    except httpx.HTTPError as e:
        st.error(f"API Error: {e}")


def on_note_save(strategy_id: str, field: str):
    try:
        save_note(notes_client(), strategy_id, field, st.session_state[note_key(strategy_id, field)])
    except httpx.HTTPError as e:
        st.error(f"API Error: {e}")


def on_question_clear(strategy_id: str):
    st.session_state[note_key(strategy_id, "question")] = ""
    on_note_edit(strategy_id, "question")


@st.fragment(run_every=1.0)
def saved_flag(strategy_id: str, field: str, cloud: bool):
    # Re-polled so the banner disappears once the server clears the flag
    try:
        note = fetch_note(notes_client(), strategy_id)
    except httpx.HTTPError:
        return
    banner = saved_banner(note, field, cloud)
    if banner:
        st.success(banner)


def render_assistant_text(content: str) -> str:
    return to_markdown(render_message(content))


# ============ SIDEBAR ============

st.sidebar.title("Polaris 2.0")
st.sidebar.caption("INSTRUCTOR FRAMEWORK")
selected = st.sidebar.radio("Strategy", [t.value for t in StrategyType])

notes_state = api_get("/notes/") or {}
cloud = bool(notes_state.get("remote_enabled"))
st.sidebar.markdown("---")
st.sidebar.markdown("🟢 **Cloud Sync Active**" if cloud else "⚪ **Offline Storage**")

detail = api_get(f"/strategies/{quote(selected)}")
if not detail:
    st.stop()
strategy = StrategyRecord.model_validate(detail)

if not notes_state.get("hydrated", False):
    st.info("Loading Records...")
    st.stop()

note = api_get(f"/notes/{quote(selected)}") or {}

guide_col, chat_col = st.columns([3, 1.3])

# ============ STRATEGY GUIDE ============

with guide_col:
    st.title(strategy.id.value)
    st.markdown(strategy.purpose)

    time_col, tool_col = st.columns(2)
    time_col.metric("Time Required", strategy.total_time)
    tool_col.metric("Recommended Tool(s)", recommended_tool(strategy))

    st.info(f"**Activity Overview**\n\n{overview_text(strategy)}")

    # Question creator
    st.subheader("🪄 Question Creator")
    st.caption(
        "Draft your core prompt for this activity. "
        + ("Saves to your database." if cloud else "Saves to your browser storage.")
    )
    label = (
        "Draft your Reflection Question:"
        if strategy.id is StrategyType.SELF_REFLECTION
        else f"Draft your {strategy.id.value} Question:"
    )
    question_key = note_key(selected, "question")
    if question_key not in st.session_state:
        st.session_state[question_key] = note.get("question", "")
    st.text_area(
        label,
        max_chars=settings.question_max_chars,
        placeholder="e.g., Why might two people interpret this data differently?",
        key=question_key,
        on_change=on_note_edit,
        args=(selected, "question"),
    )
    save_col, clear_col = st.columns([1, 1])
    save_col.button(
        "Save to Cloud" if cloud else "Save Locally",
        key=f"save-q-{selected}",
        on_click=on_note_save,
        args=(selected, "question"),
    )
    clear_col.button("Clear", key=f"clear-q-{selected}", on_click=on_question_clear, args=(selected,))
    saved_flag(selected, "question", cloud)

    if strategy.id is StrategyType.WARM_UP_POLL and strategy.tool_link:
        st.markdown("#### Setup Instructions")
        st.markdown(
            f"- Generate your poll on [Mentimeter]({strategy.tool_link})\n"
            "- Download the QR code for student access.\n"
            "- Paste the session code into your final slide."
        )

    # Flow
    st.subheader("Step-by-Step Instructor Flow")
    for idx, step in enumerate(strategy.flow):
        title = f"{idx + 1}. {step.phase}" + (f"  ·  {step.time}" if step.time else "")
        with st.expander(title, expanded=(idx == 0)):
            if step.goal:
                st.markdown(f"**Goal**  \n{step.goal}")
            st.markdown(f"**Action Item**  \n{step.action}")
            if step.ai_tip:
                st.info(f"**Instructor Tip**  \n{step.ai_tip}")
            if step.prompt and st.toggle("Reveal Speaker Notes", key=f"notes-{selected}-{idx}"):
                for line in speaker_lines(step.prompt):
                    st.markdown(f"> _“{line}”_")

    # Tips and pitfalls
    tips_col, mistakes_col = st.columns(2)
    with tips_col:
        st.markdown("#### ✅ Implementation Tips")
        for tip in strategy.tips:
            st.markdown(f"- {tip}")
    if strategy.mistakes:
        with mistakes_col:
            st.markdown("#### ❌ Avoid These")
            for mistake in strategy.mistakes:
                st.markdown(f"- {mistake}")

    # Reflection
    st.subheader("Reflection for Instructors (Post-Activity)")
    for prompt in instructor_reflection_prompts(strategy):
        st.markdown(f"> _{prompt}_")
    reflection_key = note_key(selected, "reflection")
    if reflection_key not in st.session_state:
        st.session_state[reflection_key] = note.get("reflection", "")
    st.text_area(
        "Reflect on what worked best and what you’d change:",
        placeholder="Type your insights here...",
        key=reflection_key,
        on_change=on_note_edit,
        args=(selected, "reflection"),
    )
    st.button(
        "Sync Reflection" if cloud else "Save Locally",
        key=f"save-r-{selected}",
        on_click=on_note_save,
        args=(selected, "reflection"),
    )
    saved_flag(selected, "reflection", cloud)

# ============ STRATEGY ASSISTANT ============

with chat_col:
    st.subheader("Strategy Assistant")
    st.caption(f"Implementing {strategy.id.value}")

    messages = api_get("/assistant/messages") or []
    if not messages:
        st.markdown("**Quick Questions:**")
        for quick in QUICK_QUESTIONS:
            if st.button(f"“{quick}”", key=f"quick-{quick}"):
                st.session_state["pending_question"] = quick

    for message in messages:
        with st.chat_message(message["role"]):
            if message["role"] == "assistant":
                st.markdown(render_assistant_text(message["content"]))
            else:
                st.markdown(message["content"])

    typed = st.chat_input("Ask about the strategy...")
    pending = typed or st.session_state.pop("pending_question", None)
    if pending:
        with st.spinner("Thinking..."):
            result = api_post(
                "/assistant/messages",
                {"strategy_id": selected, "message": pending},
                timeout=120.0,
            )
        if result:
            st.rerun()
