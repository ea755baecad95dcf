"""View model for the episode widget.

The renderer is an external collaborator: it gets a StageView built purely
from the snapshots and the display config, and never touches navigation
state directly.
"""

from __future__ import annotations

from chubflix.config import StageConfig, Theme
from chubflix.models import ChatState, InitState, MessageState, WireModel

FINAL_BUTTON_TEXT = "Final"
PREVIOUS_BUTTON_TEXT = "← Prev"


class StageView(WireModel):
    character_name: str
    title: str
    episode_number: int  # 1-based
    total_episodes: int
    episode_label: str | None  # None when show_episode_number is off
    progress_percent: float | None  # None when show_progress is off
    can_go_back: bool
    can_go_forward: bool
    previous_button_text: str
    next_button_text: str
    highest_episode_reached: int
    completed: bool
    theme: Theme


def build_view(
    init_state: InitState,
    chat_state: ChatState,
    turn_state: MessageState,
    config: StageConfig,
) -> StageView:
    index = turn_state.current_episode
    total = init_state.total_episodes
    if 0 <= index < len(init_state.episode_titles):
        title = init_state.episode_titles[index]
    else:
        title = f"Episode {index + 1}"
    is_first = index <= 0
    is_last = index >= total - 1

    return StageView(
        character_name=init_state.character_name,
        title=title,
        episode_number=index + 1,
        total_episodes=total,
        episode_label=f"Episode {index + 1} of {total}" if config.show_episode_number else None,
        progress_percent=(index + 1) / total * 100 if config.show_progress else None,
        can_go_back=not is_first,
        can_go_forward=not is_last,
        previous_button_text=PREVIOUS_BUTTON_TEXT,
        next_button_text=FINAL_BUTTON_TEXT if is_last else config.button_text,
        highest_episode_reached=chat_state.highest_episode_reached,
        completed=chat_state.completed,
        theme=config.theme,
    )
