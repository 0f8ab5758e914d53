"""Dati mock con cui viene montata ogni vista.

I due dataset sono indipendenti: nessun legame tra le consegne del docente
e gli assignment dello studente.
"""
from datetime import date
from typing import List

from app.schemas.assignment import TeacherAssignment, StudentAssignment, AssignmentStatus
from app.schemas.submission import Submission, SubmissionStatus


def teacher_assignments(roster_size: int = 25) -> List[TeacherAssignment]:
    return [
        TeacherAssignment(
            id="1",
            title="React Fundamentals Project",
            description="Build a React application demonstrating component lifecycle and state management",
            dueDate=date(2024, 12, 15),
            maxScore=100,
            submissions=18,
            totalStudents=roster_size,
        ),
        TeacherAssignment(
            id="2",
            title="Database Design Assignment",
            description="Design a normalized database schema for an e-commerce application",
            dueDate=date(2024, 12, 20),
            maxScore=75,
            submissions=12,
            totalStudents=roster_size,
        ),
    ]


def teacher_submissions() -> List[Submission]:
    return [
        Submission(
            id="1",
            studentName="Alice Johnson",
            assignmentTitle="React Fundamentals Project",
            submittedAt="2024-12-10 14:30",
            status=SubmissionStatus.PENDING,
            maxScore=100,
        ),
        Submission(
            id="2",
            studentName="Bob Smith",
            assignmentTitle="React Fundamentals Project",
            submittedAt="2024-12-09 16:45",
            status=SubmissionStatus.GRADED,
            score=85,
            maxScore=100,
            feedback="Great work on component structure. Consider adding more error handling.",
        ),
        Submission(
            id="3",
            studentName="Carol Davis",
            assignmentTitle="Database Design Assignment",
            submittedAt="2024-12-11 09:15",
            status=SubmissionStatus.PENDING,
            maxScore=75,
        ),
    ]


def student_assignments() -> List[StudentAssignment]:
    return [
        StudentAssignment(
            id="1",
            title="React Fundamentals Project",
            description="Build a React application demonstrating component lifecycle and state management",
            dueDate=date(2024, 12, 15),
            maxScore=100,
            status=AssignmentStatus.GRADED,
            score=85,
            feedback="Great work on component structure. Consider adding more error handling.",
            submittedAt="2024-12-10 14:30",
        ),
        StudentAssignment(
            id="2",
            title="Database Design Assignment",
            description="Design a normalized database schema for an e-commerce application",
            dueDate=date(2024, 12, 20),
            maxScore=75,
            status=AssignmentStatus.SUBMITTED,
            submittedAt="2024-12-11 09:15",
        ),
        StudentAssignment(
            id="3",
            title="API Integration Project",
            description="Create a web application that integrates with a RESTful API",
            dueDate=date(2024, 12, 25),
            maxScore=90,
        ),
        StudentAssignment(
            id="4",
            title="CSS Responsive Design",
            description="Build a responsive website using modern CSS techniques",
            dueDate=date(2024, 12, 30),
            maxScore=80,
        ),
    ]
