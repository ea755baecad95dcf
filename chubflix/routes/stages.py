"""Stage lifecycle endpoints: create, load, before-prompt, after-response, set-state."""

from fastapi import APIRouter, HTTPException

from chubflix import registry
from chubflix.stage import Stage

from .models import CreateStage, LifecycleMessage, TurnSnapshotBody

router = APIRouter()


def require_stage(chat_id: str) -> Stage:
    stage = registry.get_stage(chat_id)
    if not stage:
        raise HTTPException(404, "Stage not found")
    return stage


@router.post("/stages/{chat_id}", status_code=201)
async def create_stage(chat_id: str, body: CreateStage):
    """Construct (or replace) the stage for a chat and return its load response."""
    stage = Stage(
        body.characters,
        body.config,
        init_state=body.init_state,
        chat_state=body.chat_state,
        message_state=body.message_state,
    )
    registry.put_stage(chat_id, stage)
    return await stage.load()


@router.delete("/stages/{chat_id}")
async def delete_stage(chat_id: str):
    """Drop a chat's stage."""
    if not registry.remove_stage(chat_id):
        raise HTTPException(404, "Stage not found")
    return {"ok": True}


@router.post("/stages/{chat_id}/load")
async def load_stage(chat_id: str):
    """Init snapshot plus current chat snapshot."""
    return await require_stage(chat_id).load()


@router.post("/stages/{chat_id}/before-prompt")
async def before_prompt(chat_id: str, body: LifecycleMessage):
    """Run the before-model-call hook for a user message."""
    return await require_stage(chat_id).before_prompt(body.message)


@router.post("/stages/{chat_id}/after-response")
async def after_response(chat_id: str, body: LifecycleMessage):
    """Run the after-model-call hook for a bot message."""
    return await require_stage(chat_id).after_response(body.message)


@router.post("/stages/{chat_id}/set-state")
async def set_state(chat_id: str, body: TurnSnapshotBody):
    """Conform the stage to a stored turn snapshot."""
    await require_stage(chat_id).set_state(body.model_dump(by_alias=True))
    return {"ok": True}
