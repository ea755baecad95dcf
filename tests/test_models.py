"""Tests for chubflix.models."""

from chubflix.models import (
    Character,
    ChatState,
    InitState,
    LoadResponse,
    MessageState,
    StageResponse,
)


class TestCharacter:
    def test_fields(self) -> None:
        c = Character(name="Sofia", first_mes="Hi", alternate_greetings=["Yo"])
        assert c.name == "Sofia"
        assert c.first_mes == "Hi"
        assert c.alternate_greetings == ["Yo"]

    def test_missing_name_uses_placeholder(self) -> None:
        assert Character().name == "Character"
        assert Character.model_validate({"name": ""}).name == "Character"
        assert Character.model_validate({"name": None}).name == "Character"

    def test_non_list_greetings_become_empty(self) -> None:
        c = Character.model_validate({"alternate_greetings": None})
        assert c.alternate_greetings == []

    def test_non_string_greetings_dropped(self) -> None:
        c = Character.model_validate({"alternate_greetings": ["a", 3, None, "b"]})
        assert c.alternate_greetings == ["a", "b"]

    def test_non_string_first_mes_ignored(self) -> None:
        assert Character.model_validate({"first_mes": 42}).first_mes is None

    def test_extra_card_fields_ignored(self) -> None:
        c = Character.model_validate({"name": "Sofia", "description": "A barista.", "personality": "warm"})
        assert c.name == "Sofia"


class TestSnapshots:
    def test_init_state_wire_names(self) -> None:
        s = InitState(total_episodes=2, character_name="Sofia", episode_titles=["A", "B"])
        assert s.model_dump(by_alias=True) == {
            "totalEpisodes": 2,
            "characterName": "Sofia",
            "episodeTitles": ["A", "B"],
        }

    def test_chat_state_defaults(self) -> None:
        assert ChatState().model_dump(by_alias=True) == {
            "highestEpisodeReached": 0,
            "completed": False,
        }

    def test_message_state_from_wire(self) -> None:
        s = MessageState.model_validate({"currentEpisode": 2, "startedAt": 1700000000000})
        assert s.current_episode == 2
        assert s.started_at == 1700000000000
        assert s.last_event is None

    def test_load_response_wire_names(self) -> None:
        r = LoadResponse(
            init_snapshot=InitState(total_episodes=1, character_name="X", episode_titles=["E"]),
            chat_snapshot=ChatState(),
        )
        dumped = r.model_dump(by_alias=True)
        assert dumped["success"] is True
        assert dumped["error"] is None
        assert dumped["initState"]["totalEpisodes"] == 1
        assert dumped["chatState"]["completed"] is False

    def test_stage_response_wire_names(self) -> None:
        r = StageResponse(
            display_text="Episode 1/1",
            turn_snapshot=MessageState(current_episode=0, started_at=5),
            chat_snapshot=ChatState(),
        )
        dumped = r.model_dump(by_alias=True)
        assert dumped["stateMessage"] == "Episode 1/1"
        assert dumped["messageState"]["currentEpisode"] == 0
        assert dumped["modifiedMessage"] is None
        assert dumped["systemMessage"] is None
