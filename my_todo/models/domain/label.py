from pydantic import BaseModel, Field

class NewLabelPayload(BaseModel):
    name: str = Field(..., min_length=1)

class Label(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
