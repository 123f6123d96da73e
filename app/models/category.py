from pydantic import BaseModel, Field

class Category(BaseModel):
    id: str = Field(alias="_id")
    name: str

    class Config:
        populate_by_name = True
