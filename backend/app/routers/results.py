"""
Result lookup endpoints.

GET /result/{student_id} goes through the cache-aside lookup; POST /addResult
persists a new record and warms the cache.
"""

from fastapi import APIRouter, Depends, status

from core.services import ResultService

from ..dependencies import get_result_service
from ..schemas import CreatedResponse, ResultCreateRequest, ResultResponse

router = APIRouter(tags=["results"])


@router.get("/result/{student_id}", response_model=ResultResponse)
def get_result(
    student_id: str,
    service: ResultService = Depends(get_result_service),
):
    """Fetch a student's result, served from the cache when warm."""
    return service.get_result(student_id)


@router.post(
    "/addResult",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_result(
    payload: ResultCreateRequest,
    service: ResultService = Depends(get_result_service),
):
    storage_key = service.put_result(payload.model_dump())
    return CreatedResponse(message="Result added", id=storage_key)
