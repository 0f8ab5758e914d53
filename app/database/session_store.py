# app/database/session_store.py
from dataclasses import dataclass
import secrets
from typing import Dict, Optional, Union

from app.database import seed
from app.database.memory_assignment import InMemoryStudentRepository, InMemoryTeacherRepository
from app.schemas.context import Role, UserContext

ViewRepo = Union[InMemoryTeacherRepository, InMemoryStudentRepository]


@dataclass
class Session:
    token: str
    user: UserContext
    repo: ViewRepo


def mount_view(role: Role, seed_mock_data: bool = True, roster_size: int = 25) -> ViewRepo:
    """Crea lo stato locale della dashboard per il ruolo indicato."""
    if role == Role.TEACHER:
        if not seed_mock_data:
            return InMemoryTeacherRepository()
        return InMemoryTeacherRepository(
            seed.teacher_assignments(roster_size), seed.teacher_submissions()
        )
    if not seed_mock_data:
        return InMemoryStudentRepository()
    return InMemoryStudentRepository(seed.student_assignments())


class SessionStore:
    """Sessioni attive, indicizzate per token. Ogni sessione ha la sua vista."""

    def __init__(self, seed_mock_data: bool = True, roster_size: int = 25):
        self._sessions: Dict[str, Session] = {}
        self._seed_mock_data = seed_mock_data
        self._roster_size = roster_size

    def open(self, user: UserContext) -> Session:
        session = Session(
            token=secrets.token_urlsafe(32),
            user=user,
            repo=mount_view(user.role, self._seed_mock_data, self._roster_size),
        )
        self._sessions[session.token] = session
        return session

    def get(self, token: str) -> Optional[Session]:
        return self._sessions.get(token)

    def close(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
