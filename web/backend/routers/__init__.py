"""API route handlers."""

from .events import router as events_router
from .volunteers import router as volunteers_router
from .matching import router as matching_router
