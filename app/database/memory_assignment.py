# app/database/memory_assignment.py
from typing import Iterable, List, Optional, Sequence

from app.database.assignment_repo import TeacherRepo, StudentRepo
from app.schemas.assignment import TeacherAssignment, StudentAssignment
from app.schemas.submission import Submission


class InMemoryTeacherRepository(TeacherRepo):
    """Stato locale della vista docente: vive quanto la sessione."""

    def __init__(
        self,
        assignments: Iterable[TeacherAssignment] = (),
        submissions: Iterable[Submission] = (),
    ):
        self._assignments: List[TeacherAssignment] = [a.model_copy() for a in assignments]
        self._submissions: List[Submission] = [s.model_copy() for s in submissions]

    async def list_assignments(self) -> Sequence[TeacherAssignment]:
        return [a.model_copy() for a in self._assignments]

    async def add_assignment(self, assignment: TeacherAssignment) -> str:
        self._assignments.append(assignment.model_copy())
        return assignment.id

    async def has_assignment(self, assignment_id: str) -> bool:
        return any(a.id == assignment_id for a in self._assignments)

    async def find_assignment(self, assignment_id: str) -> Optional[TeacherAssignment]:
        for a in self._assignments:
            if a.id == assignment_id:
                return a.model_copy()
        return None

    async def list_submissions(self) -> Sequence[Submission]:
        return [s.model_copy() for s in self._submissions]

    async def find_submission(self, submission_id: str) -> Optional[Submission]:
        for s in self._submissions:
            if s.id == submission_id:
                return s.model_copy()
        return None

    async def save_submission(self, submission: Submission) -> None:
        for i, s in enumerate(self._submissions):
            if s.id == submission.id:
                self._submissions[i] = submission.model_copy()
                return
        raise LookupError(f"Submission {submission.id} not found")


class InMemoryStudentRepository(StudentRepo):
    """Stato locale della vista studente: vive quanto la sessione."""

    def __init__(self, assignments: Iterable[StudentAssignment] = ()):
        self._assignments: List[StudentAssignment] = [a.model_copy() for a in assignments]

    async def list_assignments(self) -> Sequence[StudentAssignment]:
        return [a.model_copy() for a in self._assignments]

    async def find_one(self, assignment_id: str) -> Optional[StudentAssignment]:
        for a in self._assignments:
            if a.id == assignment_id:
                return a.model_copy()
        return None

    async def save(self, assignment: StudentAssignment) -> None:
        for i, a in enumerate(self._assignments):
            if a.id == assignment.id:
                self._assignments[i] = assignment.model_copy()
                return
        raise LookupError(f"Assignment {assignment.id} not found")
