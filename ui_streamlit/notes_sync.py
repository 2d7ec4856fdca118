"""
Note syncing between the Streamlit client and the notes API.

Drafts are pushed on every edit so the server-side local cache always holds
them; the Save buttons only trigger the explicit (remote) save. The "saved"
banners are driven by the server's transient acknowledgement flags.
"""
from typing import Optional
from urllib.parse import quote

import httpx

SAVED_BANNERS = {
    ("question", True): "✅ Synced to Cloud",
    ("question", False): "✅ Saved to Browser",
    ("reflection", True): "✅ Reflection cached.",
    ("reflection", False): "✅ Reflection cached.",
}


def note_path(strategy_id: str, field: Optional[str] = None) -> str:
    path = f"/notes/{quote(strategy_id)}"
    return f"{path}/{field}" if field else path


def fetch_note(client: httpx.Client, strategy_id: str) -> Optional[dict]:
    response = client.get(note_path(strategy_id))
    if response.status_code != 200:
        return None
    return response.json()


def push_draft(client: httpx.Client, strategy_id: str, field: str, text: str) -> dict:
    """Send the current text of a note; the server caps questions."""
    response = client.put(note_path(strategy_id, field), json={"text": text})
    response.raise_for_status()
    return response.json()


def save_note(client: httpx.Client, strategy_id: str, field: str, text: str) -> dict:
    push_draft(client, strategy_id, field, text)
    response = client.post(f"{note_path(strategy_id, field)}/save")
    response.raise_for_status()
    return response.json()


def saved_banner(note: Optional[dict], field: str, cloud: bool) -> Optional[str]:
    """Banner text while the field's saved flag is up, else None."""
    if not note or not note.get(f"{field}_saved"):
        return None
    return SAVED_BANNERS[(field, cloud)]
