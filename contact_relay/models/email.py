from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional


class SendEmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: List[str]
    subject: str
    html: str
    text: str


class EmailData(BaseModel):
    id: Optional[str] = None


class ProviderError(BaseModel):
    name: Optional[str] = None
    message: str
    statusCode: Optional[int] = None


class SendEmailResult(BaseModel):
    """Outcome of a send call: `data` on success, `error` when Resend rejected it"""
    data: Optional[EmailData] = None
    error: Optional[ProviderError] = None

    @model_validator(mode="after")
    def check_exactly_one_outcome(self):
        if (self.data is None) == (self.error is None):
            raise ValueError("exactly one of data and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
