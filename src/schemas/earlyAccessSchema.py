from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.commonUtils.enumUtils import ErrorKind


class Submission(BaseModel):
    """Trimmed payload the form client posts to /api/subscribe"""
    name: str
    email: str
    phone: str
    created_at: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "+91 98765 43210",
        }
    })


class InsertError(BaseModel):
    """Error descriptor reported by the persistence layer"""
    message: str
    code: Optional[str] = None


class InsertResult(BaseModel):
    """Either the inserted rows or an error descriptor, never both"""
    data: Optional[List[Dict[str, Any]]] = None
    error: Optional[InsertError] = None


class SubmissionResult(BaseModel):
    """Outcome of a submit attempt or of a handled request"""
    ok: bool
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    data: List[Dict[str, Any]] = Field(default_factory=list)


class SubscribeResponse(BaseModel):
    ok: bool = True
    data: List[Dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
