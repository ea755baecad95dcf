"""FastAPI API endpoints under /api.

Endpoint groups: stage lifecycle (create, load, before-prompt, after-response,
set-state, delete) and widget (view, next, previous, debug-log). Everything is
nested under /api/stages/{chat_id}/ and an unknown chat id answers 404.
"""

from fastapi import APIRouter

from .stages import router as stages_router
from .widget import router as widget_router

router = APIRouter()
router.include_router(stages_router)
router.include_router(widget_router)
