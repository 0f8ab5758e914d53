from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, status, Response

from app.schemas.auth import LoginRequest, LoginResponse
from app.schemas.context import UserContext
from app.database.session_store import Session, SessionStore
from app.core.deps import get_login_coordinator, get_session_store

from app.services.auth_service import AuthService, LoginCoordinator, get_current_session
from app.services.errors import LoginSuperseded


router = APIRouter()

CoordinatorDep = Annotated[LoginCoordinator, Depends(get_login_coordinator)]
StoreDep = Annotated[SessionStore, Depends(get_session_store)]
SessionDep = Annotated[Session, Depends(get_current_session)]
UserDep = Annotated[UserContext, Depends(AuthService.get_current_user)]


@router.post("/auth/login", response_model=LoginResponse)
async def login_endpoint(data: LoginRequest, coordinator: CoordinatorDep):
    try:
        session = await coordinator.login(data)
    except LoginSuperseded as e:
        raise HTTPException(status_code=409, detail=str(e))
    if session is None:
        raise HTTPException(status_code=422, detail="Login declined: username and password are required")
    return LoginResponse(token=session.token, username=session.user.user_id, role=session.user.role)


@router.post("/auth/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout_endpoint(session: SessionDep, store: StoreDep):
    store.close(session.token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/auth/me", response_model=UserContext)
async def me_endpoint(user: UserDep):
    return user
