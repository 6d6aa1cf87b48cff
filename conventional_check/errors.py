"""Errors raised while parsing commit messages."""
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .models import ConventionalCommit


class DefectKind(str, Enum):
    INVALID_TYPE = "invalid-type"
    MISSING_TYPE = "missing-type"
    EMPTY_SUMMARY = "empty-summary"


@dataclass(frozen=True)
class Defect:
    kind: DefectKind
    message: str


class CommitParseError(Exception):
    """Base class for all commit message errors."""


class MalformedHeaderError(CommitParseError):
    """The message lacks the mandatory ``<type>: <description>`` shape."""

    def __init__(self, message: str = 'The commit must have at least the structure: "<type>: <description>"'):
        super().__init__(message)


class InvalidCommitError(CommitParseError):
    """The message was decomposed but failed validation.

    Attributes:
        defects: Every defect found, in the order they were checked
        commit: The record assembled before validation
    """

    def __init__(self, defects: List[Defect], commit: Optional["ConventionalCommit"] = None):
        self.defects = list(defects)
        self.commit = commit
        super().__init__("\n".join(d.message for d in self.defects))

    @property
    def kinds(self) -> List[DefectKind]:
        return [d.kind for d in self.defects]
