from pydantic import BaseModel, Field

class Login(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class StatusMessage(BaseModel):
    message: str
