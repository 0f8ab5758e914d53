from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Optional
from app.schemas.assignment import TeacherAssignment, StudentAssignment
from app.schemas.submission import Submission


class TeacherRepo(ABC):
    @abstractmethod
    async def list_assignments(self) -> Sequence[TeacherAssignment]:
        """Ritorna gli assignment del docente, in ordine di inserimento."""
        raise NotImplementedError

    @abstractmethod
    async def add_assignment(self, assignment: TeacherAssignment) -> str:
        """Aggiunge l'assignment in coda e ritorna il suo ID."""
        raise NotImplementedError

    @abstractmethod
    async def has_assignment(self, assignment_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    async def find_assignment(self, assignment_id: str) -> Optional[TeacherAssignment]:
        """Ritorna un assignment per ID, oppure None se non esiste."""
        raise NotImplementedError

    @abstractmethod
    async def list_submissions(self) -> Sequence[Submission]:
        """Ritorna tutte le consegne ricevute, in ordine di inserimento."""
        raise NotImplementedError

    @abstractmethod
    async def find_submission(self, submission_id: str) -> Optional[Submission]:
        """Ritorna una consegna per ID, oppure None se non esiste."""
        raise NotImplementedError

    @abstractmethod
    async def save_submission(self, submission: Submission) -> None:
        """Sostituisce la consegna con lo stesso ID, mantenendone la posizione."""
        raise NotImplementedError


class StudentRepo(ABC):
    @abstractmethod
    async def list_assignments(self) -> Sequence[StudentAssignment]:
        """Ritorna gli assignment dello studente, in ordine di inserimento."""
        raise NotImplementedError

    @abstractmethod
    async def find_one(self, assignment_id: str) -> Optional[StudentAssignment]:
        """Ritorna un assignment per ID, oppure None se non esiste."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, assignment: StudentAssignment) -> None:
        """Sostituisce l'assignment con lo stesso ID, mantenendone la posizione."""
        raise NotImplementedError
