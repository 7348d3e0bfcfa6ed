from typing import Optional
from pydantic import BaseModel


# id and text are optional here so a missing field ends up as our 400 error
# instead of FastAPI's 422
class DocumentIn(BaseModel):
    id: Optional[int] = None
    text: Optional[str] = None


class DocumentOut(BaseModel):
    id: int
    text: str


class CreateStatus(BaseModel):
    createStatus: str


class ErrorBody(BaseModel):
    code: int
    message: str


class StatisticsOut(BaseModel):
    word_count: int
    unique_word_count: int
    avg_word_length: int
    sentence_count: int


class AggregateStatisticsOut(BaseModel):
    documents_count: int
    word_count: int
    unique_word_count: int
    avg_word_length: int
    sentence_count: int
