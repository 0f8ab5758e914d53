from typing import Annotated, Optional
from fastapi import APIRouter, Depends, HTTPException

from app.schemas.assignment import AssignmentStatus, StudentAssignment, SubmitRequest
from app.schemas.dashboard import StudentDashboard
from app.database.session_store import Session

from app.services.auth_service import get_current_session
from app.services.assignment_service import AssignmentService
from app.services.dashboard_service import DashboardService
from app.services.errors import InvalidTransition


router = APIRouter()

SessionDep = Annotated[Session, Depends(get_current_session)]


@router.get("/student/assignments", response_model=list[StudentAssignment])
async def list_student_assignments_endpoint(session: SessionDep, status: Optional[AssignmentStatus] = None):
    try:
        return await AssignmentService.list_student_assignments(session.user, session.repo, status)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/student/assignments/{assignment_id}", response_model=StudentAssignment)
async def get_student_assignment_endpoint(assignment_id: str, session: SessionDep):
    try:
        result = await AssignmentService.get_student_assignment(assignment_id, session.user, session.repo)
        if result is None:
            raise HTTPException(status_code=404, detail="Assignment not found")
        return result
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.post("/student/assignments/{assignment_id}/submit", response_model=StudentAssignment)
async def submit_assignment_endpoint(assignment_id: str, submission: SubmitRequest, session: SessionDep):
    try:
        submitted = await AssignmentService.submit_assignment(assignment_id, submission, session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if submitted is None:
        raise HTTPException(status_code=422, detail="Submission declined: content is required")
    return submitted


@router.get("/student/dashboard", response_model=StudentDashboard)
async def student_dashboard_endpoint(session: SessionDep):
    try:
        return await DashboardService.student_dashboard(session.user, session.repo)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
