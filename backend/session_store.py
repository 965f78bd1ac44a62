"""
In-memory store for live form sessions.

Sessions are kept in creation order; once the limit is reached the
oldest session is evicted to make room for a new one.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from fieldkit.form.registry import FormDefinition
from fieldkit.form.session import FormSession
from fieldkit.submission import make_submit_handler

logger = logging.getLogger(__name__)


class SessionStore:
    """Manages live FormSession objects by session id."""

    def __init__(self, max_sessions: int = 1000, verbose: bool = False):
        self.max_sessions = max_sessions
        self.verbose = verbose
        self._sessions: "OrderedDict[str, FormSession]" = OrderedDict()

    def create(self, form_def: FormDefinition, submit_action: Optional[str] = None) -> FormSession:
        """Open a new session for a form, evicting the oldest if full."""
        while len(self._sessions) >= self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.warning(f"Max sessions reached, evicted session {evicted_id}")

        submit_handler = None
        if submit_action is not None:
            submit_handler = make_submit_handler(submit_action, verbose=self.verbose)

        session = FormSession(form_def, submit_handler=submit_handler, verbose=self.verbose)
        self._sessions[session.session_id] = session
        logger.info(f"Opened session {session.session_id} for form '{form_def.id}'")
        return session

    def get(self, session_id: str) -> Optional[FormSession]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """Close a session. Returns False if it did not exist."""
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info(f"Closed session {session_id}")
        return True

    def list_active(self) -> List[Dict[str, str]]:
        return [
            {"session_id": s.session_id, "form_id": s.form_id}
            for s in self._sessions.values()
        ]

    def count_active(self) -> int:
        return len(self._sessions)
