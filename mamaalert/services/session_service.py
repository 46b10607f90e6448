"""
Session Service

Per-user session context: created at login, dropped at logout. Holds the
state that lives only for the session (mode store, roadmap celebration flag).
"""

import logging
from typing import Dict, Optional

from flask import current_app

from mamaalert.services.mode_service import ModeStore

logger = logging.getLogger(__name__)

EXTENSION_KEY = "mamaalert.sessions"


class UserSession:
    def __init__(self, user_id: int):
        self.user_id = user_id
        self.mode = ModeStore(user_id)
        self.completion_celebrated = False


class SessionRegistry:
    def __init__(self, app=None):
        self._sessions: Dict[int, UserSession] = {}
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.extensions[EXTENSION_KEY] = self

    def open(self, user_id: int) -> UserSession:
        session = UserSession(user_id)
        session.mode.refresh_mode()
        self._sessions[user_id] = session
        logger.info("Opened session for user %s in %s mode", user_id, session.mode.mode.value)
        return session

    def get(self, user_id: int) -> UserSession:
        # Tokens outlive a server restart; reopen lazily
        session = self._sessions.get(user_id)
        if session is None:
            session = self.open(user_id)
        return session

    def close(self, user_id: int) -> Optional[UserSession]:
        return self._sessions.pop(user_id, None)


def current_sessions() -> SessionRegistry:
    return current_app.extensions[EXTENSION_KEY]
