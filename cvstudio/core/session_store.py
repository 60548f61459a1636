"""
Session state storage.

Sessions live in memory, least recently used first out once `max_sessions`
is reached. When a storage directory is configured each save is
also written to `<dir>/<session id>.json`; failing to write (or read) that
file is logged and otherwise ignored, the in-memory copy stays authoritative.
"""

import logging
from collections import OrderedDict
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from cvstudio.core.config import settings
from cvstudio.core.schemas import SessionState

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self, storage_dir: Optional[str] = None, max_sessions: Optional[int] = None):
        self._sessions: "OrderedDict[str, SessionState]" = OrderedDict()
        self._max_sessions = max_sessions
        self._dir = Path(storage_dir) if storage_dir else None

    def create(self, job_field: Optional[str] = None) -> SessionState:
        session = SessionState(job_field=job_field) if job_field else SessionState()
        return self.save(session)

    def get(self, session_id: str) -> Optional[SessionState]:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
            return session
        session = self._load(session_id)
        if session is not None:
            self._remember(session)
        return session

    def save(self, session: SessionState) -> SessionState:
        self._remember(session)
        self._persist(session)
        return session

    def _remember(self, session: SessionState) -> None:
        self._sessions[session.id] = session
        self._sessions.move_to_end(session.id)
        if self._max_sessions is None:
            return
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug("session_evicted id=%s", evicted)

    def delete(self, session_id: str) -> bool:
        existed = self._sessions.pop(session_id, None) is not None
        path = self._path(session_id)
        if path is not None:
            try:
                if path.exists():
                    path.unlink()
                    existed = True
            except OSError as exc:
                logger.warning("session_delete_failed id=%s: %s", session_id, exc)
        return existed

    def _path(self, session_id: str) -> Optional[Path]:
        if self._dir is None:
            return None
        # Ids are uuid hex; anything else never maps to a file
        if not session_id.isalnum():
            return None
        return self._dir / f"{session_id}.json"

    def _persist(self, session: SessionState) -> None:
        path = self._path(session.id)
        if path is None:
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(session.model_dump_json(), encoding="utf-8")
        except OSError as exc:
            logger.warning("session_persist_failed id=%s: %s", session.id, exc)

    def _load(self, session_id: str) -> Optional[SessionState]:
        path = self._path(session_id)
        if path is None or not path.exists():
            return None
        try:
            return SessionState.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            logger.warning("session_load_failed id=%s: %s", session_id, exc)
            return None


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return SessionStore(settings.storage_dir, settings.max_sessions)
