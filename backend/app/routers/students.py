"""
Student profile endpoints.
"""

from fastapi import APIRouter, Depends, Query, status

from core.repositories import StudentRepository
from core.services import student_service

from ..dependencies import get_student_repository
from ..schemas import CreatedResponse, StudentCreateRequest, StudentResponse

router = APIRouter(tags=["students"])


@router.get("/getStudents", response_model=list[StudentResponse])
def get_students(
    limit: int = Query(default=100, ge=1, le=1000),
    offset: int = Query(default=0, ge=0),
    repo: StudentRepository = Depends(get_student_repository),
):
    return student_service.list_students(repo, limit=limit, offset=offset)


@router.post(
    "/addStudent",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_student(
    payload: StudentCreateRequest,
    repo: StudentRepository = Depends(get_student_repository),
):
    storage_key = student_service.add_student(repo, payload.model_dump())
    return CreatedResponse(message="Student added", id=storage_key)
