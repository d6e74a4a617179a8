from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class MovieCandidate(BaseModel):
    title: Optional[str] = None
    year: Optional[int] = None

    # a client-supplied id is dropped here, the store assigns its own
    model_config = ConfigDict(extra='ignore')

    @field_validator('year', mode='before')
    @classmethod
    def reject_boolean_year(cls, value):
        if isinstance(value, bool):
            raise ValueError('year must be an integer, not a boolean')
        return value


class Movie(BaseModel):
    id: int
    title: str
    year: int

    model_config = ConfigDict(frozen=True)


class ErrorResponse(BaseModel):
    error: str
    details: Optional[List[str]] = None
