"""Stage configuration (display options and the context-injection switch).

Only inject_context affects logic; the rest is read by the renderer.
resolve_config() merges host-supplied values over the defaults. Unknown keys
are ignored and a recognised key with a bad value keeps its default.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import ValidationError

from chubflix.models import WireModel

logger = logging.getLogger(__name__)

Theme = Literal["dark", "light", "chubflix"]


class StageConfig(WireModel):
    show_episode_number: bool = True
    show_progress: bool = True
    button_text: str = "Next Episode"
    inject_context: bool = True
    theme: Theme = "chubflix"


_FIELDS = set(StageConfig.model_fields)
_ALIASES = {f.alias: name for name, f in StageConfig.model_fields.items() if f.alias}


def resolve_config(raw: Any) -> StageConfig:
    """Return defaults merged with the recognised, valid values from raw."""
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Ignoring non-mapping stage config: %r", raw)
        return StageConfig()

    stored: dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name in _FIELDS:
            stored[name] = value

    try:
        return StageConfig.model_validate(stored)
    except ValidationError as e:
        bad = {_ALIASES.get(err["loc"][0], err["loc"][0]) for err in e.errors() if err["loc"]}
        for name in sorted(bad, key=str):
            logger.warning("Invalid value for config %r: %r, using default", name, stored.get(name))
        return StageConfig.model_validate({k: v for k, v in stored.items() if k not in bad})
