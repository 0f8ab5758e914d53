from enum import Enum
import math
from pydantic import BaseModel, computed_field
from typing import Optional
from datetime import date


class AssignmentStatus(str, Enum):
    NOT_STARTED = "not_started"
    SUBMITTED = "submitted"
    GRADED = "graded"


class AssignmentCreate(BaseModel):
    title: str = ""
    description: str = ""
    dueDate: Optional[date] = None
    maxScore: Optional[int] = None


class TeacherAssignment(BaseModel):
    id: str
    title: str
    description: str = ""
    dueDate: date
    maxScore: int
    submissions: int = 0
    totalStudents: int


class TeacherAssignmentView(TeacherAssignment):
    submissionRate: int
    complete: bool


class StudentAssignment(BaseModel):
    id: str
    title: str
    description: str = ""
    dueDate: date
    maxScore: int
    status: AssignmentStatus = AssignmentStatus.NOT_STARTED
    score: Optional[int] = None
    feedback: Optional[str] = None
    submittedAt: Optional[str] = None

    @computed_field
    @property
    def percentage(self) -> Optional[int]:
        # voto in percentuale su maxScore, arrotondato per eccesso a .5
        if self.score is None or not self.maxScore:
            return None
        return math.floor(self.score / self.maxScore * 100 + 0.5)


class SubmitRequest(BaseModel):
    content: str = ""
    # il file allegato non viene mai letto
    attachmentName: Optional[str] = None
