"""Next Episode stage: keeps the host's three state layers in step with navigation.

The host drives the stage through four lifecycle calls, one at a time:

    load()                  → init snapshot + chat snapshot
    before_prompt(message)  → display text, turn + chat snapshots, system message
    after_response(message) → display text, turn + chat snapshots
    set_state(turn)         → conform to a stored turn (branch / rewind / regenerate)

Snapshots are the serialisation of the in-memory NavigationState; the stage
holds the authoritative copy between calls. The calls are async only to match
the host's invocation convention; there are no await points inside.

Construction never seeds the high-water mark or the completed flag from a
supplied chat snapshot, and never applies a supplied turn snapshot. Both are
recorded in the debug log only. Resumed chats therefore restart at (0, 0, False)
until the host calls set_state().
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from pydantic import BaseModel

from chubflix.catalog import EpisodeCatalog, build_catalog
from chubflix.config import StageConfig, resolve_config
from chubflix.context import build_context
from chubflix.debug_log import DebugLog, now_ms
from chubflix.models import (
    DEFAULT_CHARACTER_NAME,
    Character,
    ChatState,
    InitState,
    LoadResponse,
    MessageState,
    StageResponse,
)
from chubflix.navigation import NavigationState
from chubflix.presentation import StageView, build_view

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Protocol: what a hosting runtime may call
# ---------------------------------------------------------------------------

class StageLifecycle(Protocol):
    async def load(self) -> LoadResponse: ...

    async def before_prompt(self, message: Any) -> StageResponse: ...

    async def after_response(self, message: Any) -> StageResponse: ...

    async def set_state(self, state: MessageState | Mapping[str, Any] | None) -> None: ...


# ---------------------------------------------------------------------------
# Stage
# ---------------------------------------------------------------------------

def main_character(characters: Any) -> Character | None:
    """Pick the stage's character from the host's character data.

    Accepts a list (first entry wins) or a mapping keyed by character id
    (first value wins). Anything else, or an empty collection, gives None.
    """
    if isinstance(characters, Mapping):
        characters = list(characters.values())
    if not isinstance(characters, list) or not characters:
        return None
    first = characters[0]
    if isinstance(first, Character):
        return first
    if isinstance(first, Mapping):
        return Character.model_validate(dict(first))
    return None


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True)
    return value


class Stage:
    """Plain stateful object; one per chat."""

    def __init__(
        self,
        characters: Any = None,
        config: Any = None,
        *,
        init_state: Any = None,
        chat_state: Any = None,
        message_state: Any = None,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._clock = clock
        self.debug_log = DebugLog(clock=clock)
        self.debug_log.add("constructor", {
            "characters": _dump(characters),
            "config": config,
            "initState": _dump(init_state),
            "chatState": _dump(chat_state),
            "messageState": _dump(message_state),
        })

        self.config: StageConfig = resolve_config(config)
        character = main_character(characters)
        self.character_name = character.name if character else DEFAULT_CHARACTER_NAME
        self.catalog: EpisodeCatalog = build_catalog(character)
        self.navigation = NavigationState()
        logger.info(
            "stage ready character=%r episodes=%d", self.character_name, len(self.catalog)
        )

    @property
    def total_episodes(self) -> int:
        return len(self.catalog)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def init_snapshot(self) -> InitState:
        return InitState(
            total_episodes=self.total_episodes,
            character_name=self.character_name,
            episode_titles=self.catalog.titles(),
        )

    def chat_snapshot(self) -> ChatState:
        return ChatState(
            highest_episode_reached=self.navigation.highest_episode_reached,
            completed=self.navigation.completed,
        )

    def turn_snapshot(self, last_event: str | None = None) -> MessageState:
        return MessageState(
            current_episode=self.navigation.current_episode,
            started_at=self._clock(),
            last_event=last_event,
        )

    def display_text(self) -> str:
        return f"Episode {self.navigation.current_episode + 1}/{self.total_episodes}"

    def _nav_data(self) -> dict[str, Any]:
        return {
            "currentEpisode": self.navigation.current_episode,
            "totalEpisodes": self.total_episodes,
            "highestEpisodeReached": self.navigation.highest_episode_reached,
            "completed": self.navigation.completed,
        }

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def load(self) -> LoadResponse:
        response = LoadResponse(
            init_snapshot=self.init_snapshot(),
            chat_snapshot=self.chat_snapshot(),
        )
        self.debug_log.add("load", {"response": _dump(response)})
        return response

    async def before_prompt(self, message: Any = None) -> StageResponse:
        self.debug_log.add("beforePrompt", {
            "userMessage": _dump(message),
            "currentState": self._nav_data(),
        })
        self.navigation.on_turn_start()

        response = StageResponse(
            display_text=self.display_text(),
            turn_snapshot=self.turn_snapshot("beforePrompt"),
            chat_snapshot=self.chat_snapshot(),
            system_message=build_context(
                self.catalog, self.navigation, self.config.inject_context
            ),
        )
        self.debug_log.add("beforePrompt_response", {"response": _dump(response)})
        return response

    async def after_response(self, message: Any = None) -> StageResponse:
        self.debug_log.add("afterResponse", {
            "botMessage": _dump(message),
            "currentState": self._nav_data(),
        })
        self.navigation.on_turn_end(self.total_episodes)

        response = StageResponse(
            display_text=self.display_text(),
            turn_snapshot=self.turn_snapshot("afterResponse"),
            chat_snapshot=self.chat_snapshot(),
        )
        self.debug_log.add("afterResponse_response", {"response": _dump(response)})
        return response

    async def set_state(self, state: MessageState | Mapping[str, Any] | None) -> None:
        """Conform to a stored turn snapshot. The index is applied unchecked."""
        self.debug_log.add("setState", {
            "newState": _dump(state),
            "previousState": {"currentEpisode": self.navigation.current_episode},
        })
        if state is None:
            return
        if isinstance(state, MessageState):
            index: Any = state.current_episode
        elif isinstance(state, Mapping):
            index = state.get("currentEpisode", state.get("current_episode"))
        else:
            logger.warning("Unrecognised turn snapshot %r, restoring episode 0", state)
            index = None
        self.navigation.restore_to(index)
        if not 0 <= self.navigation.current_episode < self.total_episodes:
            logger.warning(
                "Restored episode %d is outside the catalog (%d episodes)",
                self.navigation.current_episode, self.total_episodes,
            )

    # ------------------------------------------------------------------
    # Widget actions
    # ------------------------------------------------------------------

    def go_to_next_episode(self) -> bool:
        moved = self.navigation.advance(self.total_episodes)
        if moved:
            self.debug_log.add("goToNextEpisode", {
                "newEpisode": self.navigation.current_episode,
                "highestEpisodeReached": self.navigation.highest_episode_reached,
                "completed": self.navigation.completed,
            })
        return moved

    def go_to_previous_episode(self) -> bool:
        moved = self.navigation.retreat()
        if moved:
            self.debug_log.add("goToPreviousEpisode", {
                "newEpisode": self.navigation.current_episode,
            })
        return moved

    def view(self) -> StageView:
        return build_view(
            self.init_snapshot(), self.chat_snapshot(), self.turn_snapshot(), self.config
        )
