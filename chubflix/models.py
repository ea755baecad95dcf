"""Core domain models.

Snapshots cross the boundary to the hosting chat runtime, so their field
names on the wire are camelCase (``currentEpisode``, ``highestEpisodeReached``
...). Python code uses the snake_case attributes; dump with ``by_alias=True``
when handing data to the host.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_CHARACTER_NAME = "Character"


class WireModel(BaseModel):
    """Base for everything the host stores or sends: camelCase aliases, snake_case access."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

class Character(BaseModel):
    """The host's character card, reduced to the fields episodes are built from."""

    name: str = DEFAULT_CHARACTER_NAME
    first_mes: str | None = None  # primary greeting
    alternate_greetings: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v:
            return DEFAULT_CHARACTER_NAME
        return v

    @field_validator("first_mes", mode="before")
    @classmethod
    def _greeting_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, str) else None

    @field_validator("alternate_greetings", mode="before")
    @classmethod
    def _greetings_list(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return []
        return [g for g in v if isinstance(g, str)]


class Episode(BaseModel):
    """One greeting treated as a narrative unit. Never mutated after the catalog is built."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    title: str
    source_text: str


# ---------------------------------------------------------------------------
# Persisted layers
# ---------------------------------------------------------------------------

class InitState(WireModel):
    """Written once when the catalog is built."""

    total_episodes: int
    character_name: str
    episode_titles: list[str]


class ChatState(WireModel):
    """Spans the whole conversation."""

    highest_episode_reached: int = 0
    completed: bool = False


class MessageState(WireModel):
    """Per-turn snapshot; read back on branch, rewind and regenerate."""

    current_episode: int = 0
    started_at: int  # epoch milliseconds
    last_event: str | None = None


# ---------------------------------------------------------------------------
# Lifecycle responses
# ---------------------------------------------------------------------------

class LoadResponse(WireModel):
    success: bool = True
    error: str | None = None
    init_snapshot: InitState = Field(alias="initState")
    chat_snapshot: ChatState = Field(alias="chatState")


class StageResponse(WireModel):
    display_text: str = Field(alias="stateMessage")
    turn_snapshot: MessageState = Field(alias="messageState")
    chat_snapshot: ChatState = Field(alias="chatState")
    modified_message: str | None = None
    system_message: str | None = None


class DebugLogEntry(BaseModel):
    timestamp: int  # epoch milliseconds
    event: str
    data: Any = None
