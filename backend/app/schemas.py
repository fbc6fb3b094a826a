"""
Pydantic schemas for request and response validation.

Request bodies accept any JSON value per field and are not coerced: the
services validate them and report malformed input as 400 errors rather than
letting FastAPI answer 422 or silently turn "90" into 90.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ResultCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    name: Any = None
    subjects: Any = None


class ResultResponse(BaseModel):
    id: str
    name: str | None = None
    subjects: dict[str, int]


class StudentCreateRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Any = None
    name: Any = None
    email: Any = None
    dob: Any = None
    gender: Any = None


class StudentResponse(BaseModel):
    id: str
    name: str
    email: str | None = None
    dob: str | None = None
    gender: str | None = None


class CreatedResponse(BaseModel):
    message: str
    id: int
