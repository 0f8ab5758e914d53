from enum import Enum
from pydantic import BaseModel


class Role(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"


class UserContext(BaseModel):
    user_id: str
    role: Role
