from typing import Annotated, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.schemas.assignment import AssignmentCreate, TeacherAssignment
from app.schemas.dashboard import TeacherDashboard
from app.schemas.submission import GradeRequest, Submission, SubmissionStatus
from app.database.session_store import Session

from app.services.auth_service import get_current_session
from app.services.assignment_service import AssignmentService
from app.services.dashboard_service import DashboardService
from app.services.errors import InvalidTransition
from app.services.grading_service import GradingService


router = APIRouter()

SessionDep = Annotated[Session, Depends(get_current_session)]


@router.get("/teacher/assignments", response_model=list[TeacherAssignment])
async def list_teacher_assignments_endpoint(session: SessionDep):
    try:
        return await AssignmentService.list_teacher_assignments(session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.post("/teacher/assignments", status_code=status.HTTP_201_CREATED)
async def create_assignment_endpoint(assignment: AssignmentCreate, session: SessionDep):
    try:
        created = await AssignmentService.create_assignment(assignment, session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    if created is None:
        raise HTTPException(status_code=422, detail="Assignment creation declined: title and due date are required")

    location = f"/api/v1/teacher/assignments/{created.id}"
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=created.model_dump(mode="json"),
        headers={"Location": location},
    )


@router.get("/teacher/assignments/{assignment_id}", response_model=TeacherAssignment)
async def get_teacher_assignment_endpoint(assignment_id: str, session: SessionDep):
    try:
        result = await AssignmentService.get_teacher_assignment(assignment_id, session.user, session.repo)
        if result is None:
            raise HTTPException(status_code=404, detail="Assignment not found")
        return result
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/teacher/submissions",response_model=list[Submission])
async def list_submissions_endpoint(session: SessionDep, status: Optional[SubmissionStatus] = None):
    try:
        return await GradingService.list_submissions(session.user, session.repo, status)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.post("/teacher/submissions/{submission_id}/grade", response_model=Submission)
async def grade_submission_endpoint(submission_id: str, grade: GradeRequest, session: SessionDep):
    try:
        graded = await GradingService.grade_submission(submission_id, grade, session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if graded is None:
        raise HTTPException(status_code=422, detail="Grading declined: a score is required")
    return graded


@router.get("/teacher/dashboard", response_model=TeacherDashboard)
async def teacher_dashboard_endpoint(session: SessionDep):
    try:
        return await DashboardService.teacher_dashboard(session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
