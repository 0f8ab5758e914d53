from pydantic import BaseModel
from typing import Optional

from app.schemas.context import Role


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""
    role: Role = Role.STUDENT
    clientId: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    username: str
    role: Role
