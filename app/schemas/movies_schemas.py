from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict


class MovieQueryParams(BaseModel):
    year: Optional[str] = None
    page: Optional[str] = None


class RawMovie(BaseModel):
    model_config = ConfigDict(extra='ignore')

    id: int
    title: str
    release_date: Optional[str] = None
    vote_average: Union[int, float]


class CrewMember(BaseModel):
    model_config = ConfigDict(extra='ignore')

    name: str
    known_for_department: Optional[str] = None


class MovieSummary(BaseModel):
    title: str
    release_date: str
    vote_average: Union[int, float]
    editors: List[str]


class ErrorResponse(BaseModel):
    error: str
