"""Data models for submission verification."""

from typing import Optional, Literal
from pydantic import BaseModel, Field


RejectionCode = Literal[
    "TOO_SHORT",
    "IS_ROOT_WORD",
    "ALREADY_USED",
    "NOT_POSSIBLE",
    "NOT_REAL",
]


class Rejection(BaseModel):
    """Why a submitted word was refused, with a title/message pair for display."""
    code: RejectionCode
    title: str
    message: str


class SubmissionResult(BaseModel):
    """Result of submitting a single word."""
    accepted: bool
    word: str
    rejection: Optional[Rejection] = None
    points: int = Field(default=0, ge=0)
