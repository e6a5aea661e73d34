from fastapi import Path
from pydantic import BaseModel, Field
from typing import Annotated, Optional, List
from app.api.todo.label.schemas import LabelOut

# ids are PostgreSQL INTEGER columns
RowId = Annotated[int, Field(ge=-2**31, le=2**31 - 1)]
PathId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]

class TodoCreate(BaseModel):
    text: str = Field(min_length=1, max_length=100)
    labels: List[RowId] = []

class TodoUpdate(BaseModel):
    text: Optional[str] = Field(default=None, min_length=1, max_length=100)
    completed: Optional[bool] = None
    labels: Optional[List[RowId]] = None  # replaces the whole label set when given

class TodoOut(BaseModel):
    id: int
    text: str
    completed: bool
    labels: List[LabelOut] = []

    model_config = {
        "from_attributes": True
    }
