"""Client module for LeetCode interaction."""

from .client import LeetCodeClient
from .models import (
    CodeDefinition,
    Contest,
    ContestQuestionStub,
    MetaData,
    Param,
    Problem,
    Question,
    Stats,
    UserIdentity,
)
from .parser import ParseError

__all__ = [
    "LeetCodeClient",
    "ParseError",
    "CodeDefinition",
    "Contest",
    "ContestQuestionStub",
    "MetaData",
    "Param",
    "Problem",
    "Question",
    "Stats",
    "UserIdentity",
]
