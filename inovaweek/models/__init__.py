from .evaluation import Evaluation
from .group import Group
from .student import Student

__all__ = [
    "Evaluation",
    "Group",
    "Student",
]
