import logging
from typing import List, Optional, Sequence
from app.core.config import settings
from app.schemas.context import UserContext
from app.schemas.submission import GradeRequest, Submission, SubmissionStatus
from app.database.assignment_repo import TeacherRepo
from app.services.assignment_service import _is_teacher
from app.services.errors import InvalidTransition

logger = logging.getLogger("portal.grading")


def parse_score(raw: str, max_score: int, strict_bounds: bool) -> int:
    try:
        score = int(raw.strip())
    except ValueError:
        raise ValueError(f"Score must be an integer, got {raw!r}") from None
    if strict_bounds and not 0 <= score <= max_score:
        raise ValueError(f"Score must be between 0 and {max_score}")
    return score


class GradingService:

    @staticmethod
    async def list_submissions(
        user: UserContext,
        repo: TeacherRepo,
        status: Optional[SubmissionStatus] = None,
    ) -> List[Submission]:
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers can review submissions")
        items: Sequence[Submission] = await repo.list_submissions()
        if status is None:
            return list(items)
        return [s for s in items if s.status == status]

    @staticmethod
    async def grade_submission(
        submission_id: str,
        data: GradeRequest,
        user: UserContext,
        repo: TeacherRepo,
        strict_bounds: Optional[bool] = None,
    ) -> Optional[Submission]:
        """
        Porta una consegna da pending a graded, impostando insieme voto e feedback.
        Senza voto non cambia nulla e ritorna None.
        """
        if not _is_teacher(user.role):
            raise PermissionError("Only teachers can grade submissions")

        submission = await repo.find_submission(submission_id)
        if submission is None:
            raise LookupError(f"Submission {submission_id} not found")
        if submission.status != SubmissionStatus.PENDING:
            raise InvalidTransition(f"Submission {submission_id} is already graded")

        if not data.score:
            logger.info("Valutazione di %s ignorata: voto mancante", submission_id)
            return None

        if strict_bounds is None:
            strict_bounds = settings.strict_score_bounds
        score = parse_score(data.score, submission.maxScore, strict_bounds)

        submission.status = SubmissionStatus.GRADED
        submission.score = score
        submission.feedback = data.feedback
        await repo.save_submission(submission)
        logger.info("Consegna %s valutata %d/%d", submission_id, score, submission.maxScore)
        return submission
