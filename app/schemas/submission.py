from enum import Enum
from pydantic import BaseModel
from typing import Optional


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    GRADED = "graded"


class Submission(BaseModel):
    id: str
    studentName: str
    assignmentTitle: str
    submittedAt: str
    maxScore: int
    status: SubmissionStatus = SubmissionStatus.PENDING
    score: Optional[int] = None
    feedback: Optional[str] = None


class GradeRequest(BaseModel):
    # testo: un campo vuoto è diverso da zero
    score: str = ""
    feedback: str = ""
