from typing import List, Optional

from pydantic import BaseModel


class GroupDetails(BaseModel):
    notes_title: str
    notes: List[str]
    students_title: str
    students: List[str]


class GroupCard(BaseModel):
    group_id: int
    title: str
    date_label: str
    color: str
    expanded: bool = False
    details: Optional[GroupDetails] = None


class GroupListScreen(BaseModel):
    loading: bool
    error: Optional[str] = None
    error_color: Optional[str] = None
    title: Optional[str] = None
    cards: List[GroupCard] = []


class ToggleRequest(BaseModel):
    expanded: List[int] = []


class ToggleResponse(BaseModel):
    group_id: int
    expanded: List[int]
