"""
Admin session registry.

Tokens are opaque random strings mapped to ``(user_id, expires)``. Expired
entries are only dropped when somebody presents them again; there is no
background sweep, so unused sessions stay in memory until restart.
"""
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional

DEFAULT_TTL = timedelta(hours=24)


def _utcnow():
    return datetime.now(timezone.utc)


@dataclass
class AdminSession:
    user_id: int
    expires: datetime


class SessionRegistry:
    def __init__(self, ttl: timedelta = DEFAULT_TTL, clock: Callable[[], datetime] = _utcnow):
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[str, AdminSession] = {}

    def __len__(self):
        return len(self._sessions)

    def create_session(self, user_id: int) -> str:
        token = secrets.token_urlsafe(32)
        self._sessions[token] = AdminSession(user_id=user_id, expires=self.clock() + self.ttl)
        return token

    def validate_session(self, token: Optional[str]) -> Optional[int]:
        if not token:
            return None
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.expires <= self.clock():
            del self._sessions[token]
            return None
        return session.user_id

    def destroy_session(self, token: Optional[str]) -> None:
        if token:
            self._sessions.pop(token, None)

    def clear(self) -> None:
        self._sessions.clear()
