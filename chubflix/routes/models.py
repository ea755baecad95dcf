"""Pydantic request models for the stage runner endpoints."""

from typing import Any

from pydantic import Field

from chubflix.models import WireModel


class CreateStage(WireModel):
    characters: Any = None
    config: dict[str, Any] | None = None
    init_state: dict[str, Any] | None = None
    chat_state: dict[str, Any] | None = None
    message_state: dict[str, Any] | None = None


class LifecycleMessage(WireModel):
    message: dict[str, Any] = Field(default_factory=dict)


class TurnSnapshotBody(WireModel):
    current_episode: Any = None
    started_at: int | None = None
    last_event: str | None = None
