"""Episode navigation state machine.

State: current_episode, highest_episode_reached (high-water mark), completed.

  advance      +1 unless already on the last episode; raises the high-water
               mark; reaching the last episode marks the story completed
  retreat      -1 unless already on the first episode; nothing else changes
  turn start   raises the high-water mark to the current episode
  turn end     completed |= current episode is the last one
  restore      jump straight to a stored turn's episode (unchecked)

`completed` is informational, never a gate, and once set it stays set, even
after retreating. Boundary moves are silent no-ops; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class NavigationState:
    current_episode: int = 0
    highest_episode_reached: int = 0
    completed: bool = False

    def advance(self, total_episodes: int) -> bool:
        """Move to the next episode. Returns False at the last one."""
        if self.current_episode >= total_episodes - 1:
            return False
        self.current_episode += 1
        self.highest_episode_reached = max(self.highest_episode_reached, self.current_episode)
        if self.current_episode >= total_episodes - 1:
            self.completed = True
        return True

    def retreat(self) -> bool:
        """Move to the previous episode. Returns False at the first one."""
        if self.current_episode <= 0:
            return False
        self.current_episode -= 1
        return True

    def on_turn_start(self) -> None:
        self.highest_episode_reached = max(self.highest_episode_reached, self.current_episode)

    def on_turn_end(self, total_episodes: int) -> None:
        self.completed = self.completed or self.current_episode >= total_episodes - 1

    def restore_to(self, index: Any) -> None:
        """Jump to a stored turn's episode.

        Non-integer values (including None and bools) count as 0. The index is
        not bounds-checked and the high-water mark is left alone.
        """
        if isinstance(index, int) and not isinstance(index, bool):
            self.current_episode = index
        else:
            self.current_episode = 0
