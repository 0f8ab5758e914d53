import pytest

from app.core.config import Settings, settings
from app.database import seed
from app.database.memory_assignment import InMemoryTeacherRepository
from app.schemas.context import Role, UserContext
from app.schemas.submission import GradeRequest, SubmissionStatus
from app.services.errors import InvalidTransition
from app.services.grading_service import GradingService, parse_score


@pytest.fixture
def repo():
    return InMemoryTeacherRepository(seed.teacher_assignments(), seed.teacher_submissions())

@pytest.fixture
def teacher():
    return UserContext(user_id="teacher123", role=Role.TEACHER)

@pytest.fixture
def student():
    return UserContext(user_id="student123", role=Role.STUDENT)


@pytest.mark.asyncio
async def test_grade_pending_submission(repo, teacher):
    graded = await GradingService.grade_submission("1", GradeRequest(score="92", feedback="Ottimo"), teacher, repo)
    assert graded.status == SubmissionStatus.GRADED
    assert graded.score == 92
    assert graded.feedback == "Ottimo"

    stored = await repo.find_submission("1")
    assert stored.status == SubmissionStatus.GRADED
    assert stored.score == 92

@pytest.mark.asyncio
async def test_empty_feedback_is_allowed(repo, teacher):
    graded = await GradingService.grade_submission("3", GradeRequest(score="70"), teacher, repo)
    assert graded.feedback == ""

@pytest.mark.asyncio
async def test_missing_score_leaves_submission_pending(repo, teacher):
    result = await GradingService.grade_submission("1", GradeRequest(score="", feedback="x"), teacher, repo)
    assert result is None
    stored = await repo.find_submission("1")
    assert stored.status == SubmissionStatus.PENDING
    assert stored.score is None
    assert stored.feedback is None

@pytest.mark.asyncio
async def test_regrading_is_rejected(repo, teacher):
    with pytest.raises(InvalidTransition):
        await GradingService.grade_submission("2", GradeRequest(score="10"), teacher, repo)
    stored = await repo.find_submission("2")
    assert stored.score == 85

@pytest.mark.asyncio
async def test_grade_unknown_submission(repo, teacher):
    with pytest.raises(LookupError):
        await GradingService.grade_submission("42", GradeRequest(score="10"), teacher, repo)

@pytest.mark.asyncio
async def test_grade_requires_teacher(repo, student):
    with pytest.raises(PermissionError):
        await GradingService.grade_submission("1", GradeRequest(score="10"), student, repo)

@pytest.mark.asyncio
@pytest.mark.parametrize("score", ["101", "-1", "abc", "8.5"])
async def test_invalid_scores_are_rejected(repo, teacher, score):
    with pytest.raises(ValueError):
        await GradingService.grade_submission("1", GradeRequest(score=score), teacher, repo, strict_bounds=True)
    assert (await repo.find_submission("1")).status == SubmissionStatus.PENDING

@pytest.mark.asyncio
async def test_out_of_range_accepted_by_default(repo, teacher, monkeypatch):
    monkeypatch.setattr(settings, "strict_score_bounds", False)
    graded = await GradingService.grade_submission("1", GradeRequest(score="150"), teacher, repo)
    assert graded.score == 150
    negative = await GradingService.grade_submission("3", GradeRequest(score="-5"), teacher, repo)
    assert negative.score == -5

def test_bounds_are_not_checked_unless_configured():
    assert Settings().strict_score_bounds is False

@pytest.mark.asyncio
async def test_out_of_range_accepted_without_strict_bounds(repo, teacher):
    graded = await GradingService.grade_submission("3", GradeRequest(score="120"), teacher, repo, strict_bounds=False)
    assert graded.score == 120

@pytest.mark.asyncio
async def test_list_submissions_by_status(repo, teacher):
    pending = await GradingService.list_submissions(teacher, repo, SubmissionStatus.PENDING)
    assert [s.studentName for s in pending] == ["Alice Johnson", "Carol Davis"]
    graded = await GradingService.list_submissions(teacher, repo, SubmissionStatus.GRADED)
    assert [s.studentName for s in graded] == ["Bob Smith"]

@pytest.mark.asyncio
async def test_grading_does_not_touch_assignment_counters(repo, teacher):
    before = [a.submissions for a in await repo.list_assignments()]
    await GradingService.grade_submission("1", GradeRequest(score="50"), teacher, repo)
    after = [a.submissions for a in await repo.list_assignments()]
    assert before == after


def test_parse_score_trims_whitespace():
    assert parse_score(" 7 ", 10, strict_bounds=True) == 7

def test_parse_score_bounds_are_inclusive():
    assert parse_score("0", 10, strict_bounds=True) == 0
    assert parse_score("10", 10, strict_bounds=True) == 10
