"""In-memory stage registry: one Stage per chat id, alive for the process lifetime."""

from __future__ import annotations

import logging

from chubflix.stage import Stage

logger = logging.getLogger(__name__)

_stages: dict[str, Stage] = {}


def put_stage(chat_id: str, stage: Stage) -> Stage:
    """Register a stage, replacing any existing one for the chat."""
    if chat_id in _stages:
        logger.info("replacing stage for chat %r", chat_id)
    _stages[chat_id] = stage
    return stage


def get_stage(chat_id: str) -> Stage | None:
    return _stages.get(chat_id)


def remove_stage(chat_id: str) -> bool:
    return _stages.pop(chat_id, None) is not None


def clear() -> None:
    _stages.clear()
