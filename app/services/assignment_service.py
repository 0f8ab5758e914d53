from datetime import datetime
import logging
import time
from typing import List, Sequence, Optional
from app.core.config import settings
from app.schemas.assignment import (
    AssignmentCreate,
    AssignmentStatus,
    StudentAssignment,
    SubmitRequest,
    TeacherAssignment,
)
from app.schemas.context import Role, UserContext
from app.database.assignment_repo import TeacherRepo, StudentRepo
from app.services.errors import InvalidTransition

logger = logging.getLogger("portal.assignments")

SUBMITTED_AT_FORMAT = "%Y-%m-%d %H:%M"


async def create_assignment_id(repo: TeacherRepo) -> str:
    # id derivato dal timestamp in millisecondi, incrementato se già preso
    candidate = int(time.time() * 1000)
    while await repo.has_assignment(str(candidate)):
        candidate += 1
    return str(candidate)

def _is_teacher(role):
        return role == Role.TEACHER

def _is_student(role):
        return role == Role.STUDENT

class AssignmentService:

    @staticmethod
    async def create_assignment(
        data: AssignmentCreate,
        user: UserContext,
        repo: TeacherRepo,
        roster_size: Optional[int] = None,
    ) -> Optional[TeacherAssignment]:
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers can create assignments")

        if not data.title or data.dueDate is None:
            logger.info("Creazione assignment ignorata: titolo o scadenza mancanti")
            return None

        max_score = data.maxScore if data.maxScore and data.maxScore > 0 else settings.default_max_score
        assignment = TeacherAssignment(
            id=await create_assignment_id(repo),
            title=data.title,
            description=data.description,
            dueDate=data.dueDate,
            maxScore=max_score,
            submissions=0,
            totalStudents=settings.roster_size if roster_size is None else roster_size,
        )

        await repo.add_assignment(assignment)
        logger.info("Assignment %s creato da %s", assignment.id, user.user_id)
        return assignment

    @staticmethod
    async def list_teacher_assignments(user: UserContext, repo: TeacherRepo) -> Sequence[TeacherAssignment]:
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers can list the assignment overview")
        return await repo.list_assignments()

    @staticmethod
    async def get_teacher_assignment(assignment_id: str, user: UserContext, repo: TeacherRepo) -> Optional[TeacherAssignment]:
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers can read the assignment overview")
        return await repo.find_assignment(assignment_id)

    @staticmethod
    async def list_student_assignments(
        user: UserContext,
        repo: StudentRepo,
        status: Optional[AssignmentStatus] = None,
    ) -> List[StudentAssignment]:
        if not _is_student(user.role):
            raise PermissionError("Only students have a personal assignment list")
        items = await repo.list_assignments()
        if status is None:
            return list(items)
        return [a for a in items if a.status == status]

    @staticmethod
    async def get_student_assignment(assignment_id: str, user: UserContext, repo: StudentRepo) -> Optional[StudentAssignment]:
        if not _is_student(user.role):
            raise PermissionError("Only students have a personal assignment list")
        return await repo.find_one(assignment_id)

    @staticmethod
    async def submit_assignment(
        assignment_id: str,
        data: SubmitRequest,
        user: UserContext,
        repo: StudentRepo,
        now: Optional[datetime] = None,
    ) -> Optional[StudentAssignment]:
        """
        Porta un assignment da not_started a submitted.
        Un testo vuoto (o di soli spazi) non cambia nulla e ritorna None.
        """
        if not _is_student(user.role):
            raise PermissionError("Only students can submit assignments")

        assignment = await repo.find_one(assignment_id)
        if assignment is None:
            raise LookupError(f"Assignment {assignment_id} not found")
        if assignment.status != AssignmentStatus.NOT_STARTED:
            raise InvalidTransition(
                f"Assignment {assignment_id} is already {assignment.status.value}"
            )

        if not data.content.strip():
            logger.info("Consegna di %s ignorata: testo vuoto", assignment_id)
            return None

        ts = now or datetime.now()
        assignment.status = AssignmentStatus.SUBMITTED
        assignment.submittedAt = ts.strftime(SUBMITTED_AT_FORMAT)
        await repo.save(assignment)
        logger.info("Assignment %s consegnato da %s", assignment_id, user.user_id)
        return assignment
