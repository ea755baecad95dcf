"""Ordered, immutable list of episodes for one character.

Index 0 is always the primary greeting (first_mes); indices 1..N are the
alternate greetings in the order the character card lists them. A greeting
without an extractable title gets a positional default ("Episode N", 1-based).
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from chubflix.models import Character, Episode
from chubflix.titles import extract_title


def default_title(index: int) -> str:
    return f"Episode {index + 1}"


class EpisodeCatalog(Sequence[Episode]):
    """Read-only sequence of episodes. Never empty."""

    def __init__(self, episodes: Sequence[Episode]) -> None:
        if not episodes:
            episodes = [Episode(index=0, title=default_title(0), source_text="")]
        self._episodes: tuple[Episode, ...] = tuple(episodes)

    def __getitem__(self, index):  # type: ignore[override]
        return self._episodes[index]

    def __len__(self) -> int:
        return len(self._episodes)

    def __iter__(self) -> Iterator[Episode]:
        return iter(self._episodes)

    def __repr__(self) -> str:
        return f"EpisodeCatalog({self.titles()!r})"

    def titles(self) -> list[str]:
        return [e.title for e in self._episodes]

    def title_for(self, index: int) -> str:
        """Title at index, or the positional default when index is out of range.

        Negative indices do not wrap around: a restored turn snapshot can carry
        any integer and must never resolve to the last episode by accident.
        """
        if 0 <= index < len(self._episodes):
            return self._episodes[index].title
        return default_title(index)


def build_catalog(character: Character | None) -> EpisodeCatalog:
    """Build the catalog from a character's primary and alternate greetings."""
    if character is None:
        return EpisodeCatalog([])

    greetings = [character.first_mes or ""]
    greetings.extend(character.alternate_greetings)

    episodes = [
        Episode(
            index=i,
            title=extract_title(text) or default_title(i),
            source_text=text,
        )
        for i, text in enumerate(greetings)
    ]
    return EpisodeCatalog(episodes)
