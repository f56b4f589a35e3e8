from pydantic import BaseModel
from typing import Optional


class ContactSubmission(BaseModel):
    name: str
    email: str
    subject: str
    message: str


class ContactResponse(BaseModel):
    success: bool
    message: str
    emailId: Optional[str] = None
