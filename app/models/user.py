from pydantic import BaseModel, Field
from typing import Optional

class User(BaseModel):
    id: str = Field(alias="_id")  # Use alias to map _id in the database to id in the model
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None

    class Config:
        populate_by_name = True
