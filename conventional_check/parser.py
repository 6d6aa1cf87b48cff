"""Conventional Commits message parser.

A message has the shape::

    <type>[(<scope>)][!]: <summary>

    [body]

    [footer-token: footer-value]...

:func:`decompose` always builds a record once the header separator is
found, even for an unknown type or an empty summary. :func:`parse` adds
the validation pass and raises :class:`InvalidCommitError` carrying
every defect.
"""
from typing import List, Optional, Tuple

from .errors import InvalidCommitError, MalformedHeaderError
from .models import (
    BREAKING_CHANGE_TOKEN,
    CommitFooter,
    ConventionalCommit,
    classify_type,
)
from .validation import CommitValidator

HEADER_SEPARATOR = ": "
PARAGRAPH_SEPARATOR = "\n\n"


def _parse_scope(scope_and_bang: str) -> Optional[str]:
    """Recover the scope from the text after the opening paren."""
    scope = scope_and_bang.rstrip("!").rstrip(")")
    return scope or None


def _parse_header(header: str) -> Tuple[str, Optional[str], bool]:
    """Split a header into its type token, scope and bang marker."""
    parts = header.split("(", 2)
    type_token = parts[0]
    scope = _parse_scope(parts[1]) if len(parts) > 1 else None
    # A bang anywhere in the header counts, e.g. "feat!" with no scope.
    return type_token, scope, "!" in header


def _parse_body_and_footers(text: Optional[str]) -> Tuple[Optional[str], Optional[List[CommitFooter]]]:
    """Classify each line after the summary as either body or footer.

    Lines are classified one at a time, so free text appearing after a
    footer still goes to the body.
    """
    if text is None:
        return None, None

    body_lines: List[str] = []
    footers: List[CommitFooter] = []
    for line in text.split("\n"):
        if HEADER_SEPARATOR in line:
            token, _, value = line.partition(HEADER_SEPARATOR)
            footers.append(CommitFooter(token=token, value=value))
        else:
            body_lines.append(line)

    # Each line keeps its own newline; a trailing run of blank lines is dropped.
    body = "".join(f"{line}\n" for line in body_lines)
    if body.endswith("\n\n"):
        body = body.rstrip("\n")
    body = body or None
    return body, footers or None


def decompose(message: str) -> ConventionalCommit:
    """Decompose a commit message without validating it.

    Args:
        message: Full commit message using ``\\n`` line separators

    Returns:
        ConventionalCommit: The assembled record, possibly carrying an
        invalid type or an empty summary

    Raises:
        MalformedHeaderError: If the message has no ``": "`` separator
    """
    header, separator, summary_and_body = message.partition(HEADER_SEPARATOR)
    if not separator:
        raise MalformedHeaderError()

    type_token, scope, has_bang = _parse_header(header)

    summary, paragraph, rest = summary_and_body.partition(PARAGRAPH_SEPARATOR)
    body, footers = _parse_body_and_footers(rest if paragraph else None)

    is_breaking_change = has_bang or any(f.token == BREAKING_CHANGE_TOKEN for f in footers or [])

    return ConventionalCommit(
        commit_type=classify_type(type_token),
        scope=scope,
        is_breaking_change=is_breaking_change,
        summary=summary,
        body=body,
        footer=footers,
    )


def parse(message: str, validator: Optional[CommitValidator] = None) -> ConventionalCommit:
    """Parse and validate a commit message.

    Raises:
        MalformedHeaderError: If the message has no ``": "`` separator
        InvalidCommitError: If the type or summary is defective; all
            defects are reported together
    """
    commit = decompose(message)
    is_valid, defects = (validator or CommitValidator()).validate(commit)
    if not is_valid:
        raise InvalidCommitError(defects, commit)
    return commit
