# test/pytest/test_assignment.py
import pytest
from datetime import date, datetime

from app.services.assignment_service import AssignmentService
from app.services.errors import InvalidTransition
from app.schemas.assignment import (
    AssignmentCreate,
    AssignmentStatus,
    StudentAssignment,
    SubmitRequest,
    TeacherAssignment,
)
from app.schemas.context import Role, UserContext

# ------------------------- Fake repositories -------------------------
class FakeTeacherRepo:
    def __init__(self, assignments=()):
        self.items: list[TeacherAssignment] = list(assignments)

    async def list_assignments(self):
        return list(self.items)

    async def add_assignment(self, assignment: TeacherAssignment) -> str:
        # NON genera ID: si aspetta assignment.id già valorizzato
        if not assignment.id:
            raise ValueError("id must be set by the service")
        self.items.append(assignment)
        return assignment.id

    async def has_assignment(self, assignment_id: str) -> bool:
        return any(a.id == assignment_id for a in self.items)

    async def find_assignment(self, assignment_id: str):
        return next((a for a in self.items if a.id == assignment_id), None)


class FakeStudentRepo:
    def __init__(self, assignments=()):
        self.items: dict[str, StudentAssignment] = {a.id: a for a in assignments}

    async def list_assignments(self):
        return [a.model_copy() for a in self.items.values()]

    async def find_one(self, assignment_id: str):
        a = self.items.get(assignment_id)
        return a.model_copy() if a else None

    async def save(self, assignment: StudentAssignment):
        self.items[assignment.id] = assignment


def _student_assignment(id_, status=AssignmentStatus.NOT_STARTED, **overrides):
    base = dict(
        id=id_,
        title=f"Compito {id_}",
        description="Desc",
        dueDate=date(2025, 1, 1),
        maxScore=100,
        status=status,
    )
    if status != AssignmentStatus.NOT_STARTED:
        base["submittedAt"] = "2024-12-10 14:30"
    if status == AssignmentStatus.GRADED:
        base.update(score=80, feedback="Bene")
    base.update(overrides)
    return StudentAssignment(**base)


# ------------------------------- Fixtures -------------------------------------
@pytest.fixture
def teacher():
    return UserContext(user_id="teacher123", role=Role.TEACHER)

@pytest.fixture
def student():
    return UserContext(user_id="student123", role=Role.STUDENT)

@pytest.fixture
def teacher_repo():
    return FakeTeacherRepo([
        TeacherAssignment(id="1", title="A", dueDate=date(2024, 12, 15), maxScore=100, submissions=18, totalStudents=25),
        TeacherAssignment(id="2", title="B", dueDate=date(2024, 12, 20), maxScore=75, submissions=12, totalStudents=25),
    ])

@pytest.fixture
def student_repo():
    return FakeStudentRepo([
        _student_assignment("1", AssignmentStatus.GRADED),
        _student_assignment("2", AssignmentStatus.SUBMITTED),
        _student_assignment("3"),
        _student_assignment("4"),
    ])


# --------------------------------- Creation -----------------------------------
@pytest.mark.asyncio
async def test_create_requires_teacher(teacher_repo, student):
    with pytest.raises(PermissionError):
        await AssignmentService.create_assignment(
            AssignmentCreate(title="Essay", dueDate=date(2025, 1, 1)), student, teacher_repo
        )

@pytest.mark.asyncio
async def test_create_with_defaults_is_appended(teacher_repo, teacher):
    created = await AssignmentService.create_assignment(
        AssignmentCreate(title="Essay", dueDate=date(2025, 1, 1)), teacher, teacher_repo
    )
    assert created is not None
    assert created.maxScore == 100
    assert created.submissions == 0
    assert created.totalStudents == 25
    assert created.description == ""
    assert [a.id for a in teacher_repo.items][-1] == created.id
    assert len(teacher_repo.items) == 3

@pytest.mark.asyncio
async def test_create_keeps_given_max_score(teacher_repo, teacher):
    created = await AssignmentService.create_assignment(
        AssignmentCreate(title="Quiz", description="Breve", dueDate=date(2025, 2, 1), maxScore=40),
        teacher, teacher_repo,
    )
    assert created.maxScore == 40
    assert created.description == "Breve"

@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    dict(title="", dueDate=date(2025, 1, 1)),
    dict(title="Essay"),
])
async def test_create_without_title_or_due_date_is_declined(teacher_repo, teacher, payload):
    result = await AssignmentService.create_assignment(AssignmentCreate(**payload), teacher, teacher_repo)
    assert result is None
    assert len(teacher_repo.items) == 2

@pytest.mark.asyncio
async def test_duplicate_titles_get_distinct_ids(teacher_repo, teacher):
    data = AssignmentCreate(title="Essay", dueDate=date(2025, 1, 1))
    first = await AssignmentService.create_assignment(data, teacher, teacher_repo)
    second = await AssignmentService.create_assignment(data, teacher, teacher_repo)
    assert first.title == second.title
    assert first.id != second.id

@pytest.mark.asyncio
async def test_get_teacher_assignment(teacher_repo, teacher, student):
    assert (await AssignmentService.get_teacher_assignment("2", teacher, teacher_repo)).title == "B"
    assert await AssignmentService.get_teacher_assignment("99", teacher, teacher_repo) is None
    with pytest.raises(PermissionError):
        await AssignmentService.get_teacher_assignment("2", student, teacher_repo)

@pytest.mark.asyncio
async def test_list_teacher_assignments_requires_teacher(teacher_repo, student):
    with pytest.raises(PermissionError):
        await AssignmentService.list_teacher_assignments(student, teacher_repo)


# --------------------------------- Submission ---------------------------------
@pytest.mark.asyncio
async def test_submit_moves_not_started_to_submitted(student_repo, student):
    now = datetime(2024, 12, 20, 10, 5)
    result = await AssignmentService.submit_assignment(
        "3", SubmitRequest(content="La mia soluzione"), student, student_repo, now=now
    )
    assert result.status == AssignmentStatus.SUBMITTED
    assert result.submittedAt == "2024-12-20 10:05"
    assert student_repo.items["3"].status == AssignmentStatus.SUBMITTED
    # nessun altro assignment cambia
    assert student_repo.items["4"].status == AssignmentStatus.NOT_STARTED
    assert student_repo.items["1"].status == AssignmentStatus.GRADED

@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
async def test_blank_submission_is_declined(student_repo, student, content):
    result = await AssignmentService.submit_assignment("3", SubmitRequest(content=content), student, student_repo)
    assert result is None
    assert student_repo.items["3"].status == AssignmentStatus.NOT_STARTED
    assert student_repo.items["3"].submittedAt is None

@pytest.mark.asyncio
@pytest.mark.parametrize("assignment_id", ["1", "2"])
async def test_submit_never_moves_backward(student_repo, student, assignment_id):
    before = student_repo.items[assignment_id].status
    with pytest.raises(InvalidTransition):
        await AssignmentService.submit_assignment(
            assignment_id, SubmitRequest(content="di nuovo"), student, student_repo
        )
    assert student_repo.items[assignment_id].status == before

@pytest.mark.asyncio
async def test_submit_unknown_assignment(student_repo, student):
    with pytest.raises(LookupError):
        await AssignmentService.submit_assignment("99", SubmitRequest(content="x"), student, student_repo)

@pytest.mark.asyncio
async def test_submit_requires_student(student_repo, teacher):
    with pytest.raises(PermissionError):
        await AssignmentService.submit_assignment("3", SubmitRequest(content="x"), teacher, student_repo)

@pytest.mark.asyncio
async def test_attachment_is_ignored(student_repo, student):
    result = await AssignmentService.submit_assignment(
        "4", SubmitRequest(content="testo", attachmentName="report.pdf"), student, student_repo
    )
    assert "report.pdf" not in result.model_dump_json()


# ---------------------------------- Listing -----------------------------------
@pytest.mark.asyncio
async def test_list_student_filtered_by_status(student_repo, student):
    items = await AssignmentService.list_student_assignments(student, student_repo, AssignmentStatus.NOT_STARTED)
    assert [a.id for a in items] == ["3", "4"]
    everything = await AssignmentService.list_student_assignments(student, student_repo)
    assert [a.id for a in everything] == ["1", "2", "3", "4"]

@pytest.mark.asyncio
async def test_get_student_assignment(student_repo, student):
    assert (await AssignmentService.get_student_assignment("2", student, student_repo)).id == "2"
    assert await AssignmentService.get_student_assignment("99", student, student_repo) is None
