"""Commit validation using Chain of Responsibility pattern.

Unlike a short-circuiting chain, every handler runs regardless of what
the previous ones found, so a caller sees all defects in one pass.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .errors import Defect, DefectKind
from .models import ConventionalCommit, InvalidType, MissingType


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, commit: ConventionalCommit) -> List[Defect]:
        """Validate and always pass on to the next handler."""
        defects = self.validate(commit)
        if self.next_handler:
            defects.extend(self.next_handler.handle(commit))
        return defects

    @abstractmethod
    def validate(self, commit: ConventionalCommit) -> List[Defect]:
        """Validate the commit."""
        pass


class CommitTypeHandler(ValidationHandler):
    """Validates that the type is part of the vocabulary."""

    def validate(self, commit: ConventionalCommit) -> List[Defect]:
        commit_type = commit.commit_type
        if isinstance(commit_type, InvalidType):
            return [Defect(DefectKind.INVALID_TYPE, f'Type "{commit_type.token}" is not a valid type')]
        if isinstance(commit_type, MissingType):
            return [Defect(DefectKind.MISSING_TYPE, "The commit must have a type")]
        return []


class SummaryHandler(ValidationHandler):
    """Validates that the summary is not empty."""

    def validate(self, commit: ConventionalCommit) -> List[Defect]:
        if not commit.summary:
            return [Defect(DefectKind.EMPTY_SUMMARY, "The commit must have a summary")]
        return []


def create_validation_chain() -> ValidationHandler:
    """Create the default validation chain."""
    summary = SummaryHandler()
    commit_type = CommitTypeHandler(summary)

    return commit_type


class CommitValidator:
    """Validates decomposed commits against the Conventional Commits rules."""

    def __init__(self, chain: Optional[ValidationHandler] = None):
        self.validation_chain = chain or create_validation_chain()

    def validate(self, commit: ConventionalCommit) -> Tuple[bool, List[Defect]]:
        """Validate a commit, returning every defect found."""
        defects = self.validation_chain.handle(commit)
        return not defects, defects
