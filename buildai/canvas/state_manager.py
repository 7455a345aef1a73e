"""
Canvas State Manager
====================

Keeps one PointerController per builder session, in memory.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from ..models.canvas_models import CanvasConfig
from .controller import PointerController

logger = logging.getLogger(__name__)


class CanvasSession:
    """A builder session and its controller."""

    def __init__(self, session_id: str, controller: PointerController):
        self.id = session_id
        self.controller = controller
        self.created_at = datetime.now()
        self.updated_at: Optional[datetime] = None

    def touch(self) -> None:
        self.updated_at = datetime.now()

    def snapshot(self) -> Dict[str, Any]:
        """Serializable view of the session for the host UI."""
        controller = self.controller
        session = controller.session
        return {
            "session_id": self.id,
            "active_region": controller.active_region.value,
            "drag_state": controller.state.value,
            "dragging_id": session.component_id if session else None,
            "components": [c.model_dump(mode="json") for c in controller.store],
            "counts": controller.store.counts_by_region(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class StateManager:
    """Manages canvas sessions."""

    def __init__(self, config: Optional[CanvasConfig] = None):
        self.config = config or CanvasConfig()
        self._cache: Dict[str, CanvasSession] = {}
        logger.info("[STATE-MANAGER] Initialized")

    def create_session(self, session_id: Optional[str] = None) -> str:
        """Create a new session with optional ID."""
        if session_id is None:
            session_id = str(uuid.uuid4())

        if session_id not in self._cache:
            controller = PointerController(config=self.config)
            self._cache[session_id] = CanvasSession(session_id, controller)
            logger.info(f"[STATE-MANAGER] Created session {session_id}")
        return session_id

    def get_session(self, session_id: str) -> Optional[CanvasSession]:
        return self._cache.get(session_id)

    def get_controller(self, session_id: str) -> Optional[PointerController]:
        session = self.get_session(session_id)
        return session.controller if session else None

    def clear_session(self, session_id: str) -> bool:
        """Clear all components from a session and reset its region."""
        session = self.get_session(session_id)
        if not session:
            return False

        session.controller.reset()
        session.touch()
        return True

    def delete_session(self, session_id: str) -> bool:
        return self._cache.pop(session_id, None) is not None

    def session_count(self) -> int:
        return len(self._cache)
