from pydantic import BaseModel
from typing import List
from datetime import date

from app.schemas.assignment import TeacherAssignmentView


class UpcomingDeadline(BaseModel):
    id: str
    title: str
    dueDate: date
    daysUntilDue: int


class StudentDashboard(BaseModel):
    total: int
    completed: int
    pendingReview: int
    notStarted: int
    averageScore: float
    averageScoreRounded: int
    completionRate: int
    upcomingDeadlines: List[UpcomingDeadline]


class TeacherDashboard(BaseModel):
    activeAssignments: int
    pendingReviews: int
    graded: int
    averageScore: float
    assignments: List[TeacherAssignmentView]
