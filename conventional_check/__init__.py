"""Conventional Commits message parser and checker."""

__version__ = "0.1.0"

from .errors import (
    CommitParseError,
    Defect,
    DefectKind,
    InvalidCommitError,
    MalformedHeaderError,
)
from .models import (
    BREAKING_CHANGE_TOKEN,
    CommitFooter,
    CommitType,
    ConventionalCommit,
    InvalidType,
    MissingType,
    classify_type,
)
from .parser import decompose, parse
from .validation import CommitValidator

__all__ = [
    'BREAKING_CHANGE_TOKEN',
    'CommitFooter',
    'CommitParseError',
    'CommitType',
    'CommitValidator',
    'ConventionalCommit',
    'Defect',
    'DefectKind',
    'InvalidCommitError',
    'InvalidType',
    'MalformedHeaderError',
    'MissingType',
    'classify_type',
    'decompose',
    'parse',
]
