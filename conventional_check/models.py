"""Shared models for conventional-check."""
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"


class CommitType(str, Enum):
    BUILD = "build"
    CHORE = "chore"
    CI = "ci"
    DOCS = "docs"
    FEAT = "feat"
    FIX = "fix"
    PERF = "perf"
    REFACTOR = "refactor"
    REVERT = "revert"
    STYLE = "style"
    TEST = "test"

    @property
    def label(self) -> str:
        return self.value


class InvalidType(BaseModel):
    """A type token that is not part of the commit type vocabulary."""

    model_config = ConfigDict(frozen=True)

    token: str

    @property
    def label(self) -> str:
        return "Invalid Commit Type"


class MissingType(BaseModel):
    """No type token was present before the separator."""

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        return "Missing Commit Type"


ParsedType = Union[CommitType, InvalidType, MissingType]

_TYPE_ALIASES = {
    "tests": CommitType.TEST,
}


def classify_type(token: str) -> ParsedType:
    """Map a raw header token onto the commit type vocabulary.

    Any ``!`` is dropped first since it marks a breaking change rather
    than being part of the type name. Lookup is case-sensitive.
    """
    name = token.replace("!", "")
    if not name:
        return MissingType()
    if name in _TYPE_ALIASES:
        return _TYPE_ALIASES[name]
    try:
        return CommitType(name)
    except ValueError:
        return InvalidType(token=name)


class CommitFooter(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    value: str


class ConventionalCommit(BaseModel):
    """A commit message decomposed into its Conventional Commits parts."""

    model_config = ConfigDict(frozen=True)

    commit_type: ParsedType
    scope: Optional[str] = None
    is_breaking_change: bool = False
    summary: str
    body: Optional[str] = None
    footer: Optional[List[CommitFooter]] = None

    @field_validator("scope")
    @classmethod
    def _scope_not_empty(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            raise ValueError("scope must be non-empty when present")
        return value

    @property
    def is_valid_type(self) -> bool:
        return isinstance(self.commit_type, CommitType)

    def has_footer(self, token: str) -> bool:
        return any(f.token == token for f in self.footer or [])
