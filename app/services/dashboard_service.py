"""Viste derivate delle due dashboard.

Le partizioni per stato vengono calcolate una sola volta per richiesta e poi
passate alle funzioni di aggregazione.
"""
from datetime import date, datetime, time
import math
from typing import Iterable, List, NamedTuple, Optional, Sequence

from app.core.config import settings
from app.schemas.assignment import (
    AssignmentStatus,
    StudentAssignment,
    TeacherAssignment,
    TeacherAssignmentView,
)
from app.schemas.context import UserContext
from app.schemas.dashboard import StudentDashboard, TeacherDashboard, UpcomingDeadline
from app.schemas.submission import Submission, SubmissionStatus
from app.database.assignment_repo import StudentRepo, TeacherRepo
from app.services.assignment_service import _is_student, _is_teacher

SECONDS_PER_DAY = 24 * 60 * 60


class StudentPartition(NamedTuple):
    not_started: List[StudentAssignment]
    submitted: List[StudentAssignment]
    graded: List[StudentAssignment]


class SubmissionPartition(NamedTuple):
    pending: List[Submission]
    graded: List[Submission]


def partition_student(assignments: Iterable[StudentAssignment]) -> StudentPartition:
    parts = StudentPartition([], [], [])
    buckets = {
        AssignmentStatus.NOT_STARTED: parts.not_started,
        AssignmentStatus.SUBMITTED: parts.submitted,
        AssignmentStatus.GRADED: parts.graded,
    }
    for a in assignments:
        buckets[a.status].append(a)
    return parts


def partition_submissions(submissions: Iterable[Submission]) -> SubmissionPartition:
    parts = SubmissionPartition([], [])
    for s in submissions:
        (parts.graded if s.status == SubmissionStatus.GRADED else parts.pending).append(s)
    return parts


def average_score(graded: Sequence) -> float:
    """Media dei voti sugli elementi già valutati; 0 se non ce ne sono."""
    if not graded:
        return 0
    return sum(item.score or 0 for item in graded) / len(graded)


def days_until_due(due_date: date, now: Optional[datetime] = None) -> int:
    now = now or datetime.now()
    due = datetime.combine(due_date, time.min, tzinfo=now.tzinfo)
    return math.ceil((due - now).total_seconds() / SECONDS_PER_DAY)


def upcoming_deadlines(
    assignments: Iterable[StudentAssignment],
    now: Optional[datetime] = None,
    limit: Optional[int] = None,
) -> List[UpcomingDeadline]:
    limit = settings.upcoming_limit if limit is None else limit
    # sorted() è stabile: a parità di data resta l'ordine originale
    nearest = sorted(
        (a for a in assignments if a.status == AssignmentStatus.NOT_STARTED),
        key=lambda a: a.dueDate,
    )[:limit]
    return [
        UpcomingDeadline(
            id=a.id,
            title=a.title,
            dueDate=a.dueDate,
            daysUntilDue=days_until_due(a.dueDate, now),
        )
        for a in nearest
    ]


def round_half_up(value: float) -> int:
    # 0.5 arrotonda sempre verso l'alto (round() di Python arrotonda al pari)
    return math.floor(value + 0.5)


def completion_rate(completed: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(completed / total * 100)


def submission_progress(assignment: TeacherAssignment) -> TeacherAssignmentView:
    rate = completion_rate(assignment.submissions, assignment.totalStudents)
    return TeacherAssignmentView(
        **assignment.model_dump(),
        submissionRate=rate,
        complete=assignment.submissions == assignment.totalStudents,
    )


class DashboardService:

    @staticmethod
    async def student_dashboard(
        user: UserContext,
        repo: StudentRepo,
        now: Optional[datetime] = None,
    ) -> StudentDashboard:
        if not _is_student(user.role):
            raise PermissionError("Only students have a student dashboard")

        assignments = await repo.list_assignments()
        parts = partition_student(assignments)
        avg = average_score(parts.graded)
        return StudentDashboard(
            total=len(assignments),
            completed=len(parts.graded),
            pendingReview=len(parts.submitted),
            notStarted=len(parts.not_started),
            averageScore=avg,
            averageScoreRounded=round_half_up(avg),
            completionRate=completion_rate(len(parts.graded), len(assignments)),
            upcomingDeadlines=upcoming_deadlines(parts.not_started, now),
        )

    @staticmethod
    async def teacher_dashboard(user: UserContext, repo: TeacherRepo) -> TeacherDashboard:
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers have a teacher dashboard")

        assignments = await repo.list_assignments()
        parts = partition_submissions(await repo.list_submissions())
        return TeacherDashboard(
            activeAssignments=len(assignments),
            pendingReviews=len(parts.pending),
            graded=len(parts.graded),
            averageScore=average_score(parts.graded),
            assignments=[submission_progress(a) for a in assignments],
        )
