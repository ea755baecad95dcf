"""Chubflix Next Episode: episode navigation and context injection for chat stages."""

from chubflix.catalog import EpisodeCatalog, build_catalog  # noqa: F401
from chubflix.config import StageConfig, resolve_config  # noqa: F401
from chubflix.context import build_context  # noqa: F401
from chubflix.navigation import NavigationState  # noqa: F401
from chubflix.stage import Stage, StageLifecycle  # noqa: F401
from chubflix.titles import extract_title  # noqa: F401
