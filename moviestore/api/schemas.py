# moviestore/api/schemas.py

from pydantic import BaseModel
from typing import Dict

class MessageResponse(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: Dict[str, str]
