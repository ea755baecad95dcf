"""Episode context injection, the system message the model sees each turn."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pybars

from chubflix.catalog import EpisodeCatalog
from chubflix.navigation import NavigationState

# Triple-stash: titles go in verbatim, no HTML escaping.
EPISODE_CONTEXT_TEMPLATE = (
    "[Chubflix Episode Context: Currently on {{{title}}} ({{number}}/{{total}}). "
    "Maintain narrative continuity with previous episodes.]"
)

_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class ContextError(Exception):
    """Raised when a context template fails to compile or render."""


def render_template(template_str: str, context: dict[str, Any]) -> str:
    """Compile (cached by source) and render a Handlebars template."""
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context))
    except Exception as e:
        raise ContextError(f"Template error: {e}") from e


def build_context(
    catalog: EpisodeCatalog, state: NavigationState, enabled: bool
) -> str | None:
    """Return the episode context string, or None when injection is disabled."""
    if not enabled:
        return None
    index = state.current_episode
    return render_template(EPISODE_CONTEXT_TEMPLATE, {
        "title": catalog.title_for(index),
        "number": str(index + 1),
        "total": str(len(catalog)),
    })
