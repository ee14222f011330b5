# File: authgate/schemas/user.py

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
