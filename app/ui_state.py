"""
app/ui_state.py

Session-state bookkeeping for the Streamlit page.

All upload-derived state lives under a fixed set of keys and is replaced
together, so a new upload never mixes with the previous dataset or error.
"""

from __future__ import annotations

from typing import Any, MutableMapping

from app.domain.upload import UploadResult

_STATE_DEFAULTS: dict[str, Any] = {
    "upload_result": None,
    "upload_hash": None,
    "upload_bytes": None,
}

# Bumped on reset so Streamlit builds a fresh, empty file uploader.
_UPLOADER_GENERATION = "uploader_generation"


def ensure_upload_state(state: MutableMapping[str, Any]) -> None:
    """Seed missing keys with defaults."""
    for key, value in _STATE_DEFAULTS.items():
        if key not in state:
            state[key] = value
    if _UPLOADER_GENERATION not in state:
        state[_UPLOADER_GENERATION] = 0


def clear_upload_state(state: MutableMapping[str, Any]) -> None:
    """Forget the current upload entirely."""
    for key, value in _STATE_DEFAULTS.items():
        state[key] = value


def is_new_upload(state: MutableMapping[str, Any], upload_hash: str) -> bool:
    return state.get("upload_hash") != upload_hash


def replace_upload_state(
    state: MutableMapping[str, Any],
    *,
    upload_hash: str,
    data: bytes,
    result: UploadResult,
) -> None:
    """Swap in the result of a new upload, discarding the previous one."""
    clear_upload_state(state)
    state["upload_hash"] = upload_hash
    state["upload_bytes"] = data
    state["upload_result"] = result


def uploader_key(state: MutableMapping[str, Any]) -> str:
    """Widget key for the file uploader in its current generation."""
    return f"csv_uploader_{state.get(_UPLOADER_GENERATION, 0)}"


def reset_uploader(state: MutableMapping[str, Any]) -> None:
    """Clear the upload and drop the file still held by the uploader widget."""
    clear_upload_state(state)
    state[_UPLOADER_GENERATION] = state.get(_UPLOADER_GENERATION, 0) + 1
