"""Widget endpoints: episode navigation, view model, and the debug log."""

from fastapi import APIRouter

from .stages import require_stage

router = APIRouter()


@router.get("/stages/{chat_id}/view")
async def get_view(chat_id: str):
    """Current view model for the episode widget."""
    return require_stage(chat_id).view()


@router.post("/stages/{chat_id}/next")
async def next_episode(chat_id: str):
    """Advance one episode (no-op on the last)."""
    stage = require_stage(chat_id)
    stage.go_to_next_episode()
    return stage.view()


@router.post("/stages/{chat_id}/previous")
async def previous_episode(chat_id: str):
    """Go back one episode (no-op on the first)."""
    stage = require_stage(chat_id)
    stage.go_to_previous_episode()
    return stage.view()


@router.get("/stages/{chat_id}/debug-log")
async def get_debug_log(chat_id: str):
    """Recorded lifecycle events, oldest first."""
    return require_stage(chat_id).debug_log.entries()


@router.delete("/stages/{chat_id}/debug-log")
async def clear_debug_log(chat_id: str):
    require_stage(chat_id).debug_log.clear()
    return {"ok": True}
