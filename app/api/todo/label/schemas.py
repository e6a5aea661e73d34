from pydantic import BaseModel, Field

class LabelBase(BaseModel):
    name: str

class LabelCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)

class LabelOut(LabelBase):
    id: int

    model_config = {
        "from_attributes": True
    }
