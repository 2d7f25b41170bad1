from typing import Optional

from pydantic import BaseModel
from enum import Enum


class MessageKind(str, Enum):
    ERROR = "error"
    SUCCESS = "success"


class PasswordResetRequest(BaseModel):
    email: str


class ScreenMessage(BaseModel):
    kind: MessageKind
    text: str
    color: str


class PasswordResetScreen(BaseModel):
    title: str
    subtitle: str
    email: str
    placeholder: str
    submit_label: str
    back_label: str
    back_path: str
    pending: bool = False
    message: Optional[ScreenMessage] = None
