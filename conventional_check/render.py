"""Human-readable rendering of parsed commits as rich markup."""
from typing import Optional

from rich.markup import escape

from .errors import CommitParseError, InvalidCommitError
from .models import CommitType, ConventionalCommit


def _quoted(value: str) -> str:
    return f'[yellow]"{escape(value)}"[/yellow]'


def _optional(value: Optional[str]) -> str:
    return f" {_quoted(value)}" if value is not None else ""


def render_type(commit: ConventionalCommit) -> str:
    """Render the commit type label.

    Invalid and missing types render as fixed phrases so the raw token
    never reaches the output.
    """
    if isinstance(commit.commit_type, CommitType):
        return _quoted(commit.commit_type.label)
    return commit.commit_type.label


def render_commit(commit: ConventionalCommit) -> str:
    footers = ", ".join(
        "{" + f"{_quoted(f.token)}: {_quoted(f.value)}" + "}" for f in commit.footer or []
    )
    lines = [
        f"- Commit Type: {render_type(commit)}",
        f"- Scope:{_optional(commit.scope)}",
        f"- Is Breaking Change: [magenta]{str(commit.is_breaking_change).lower()}[/magenta]",
        f"- Summary: {_quoted(commit.summary)}",
        f"- Body:{_optional(commit.body)}",
        f"- Footers: [{footers}]",
    ]
    return "\n".join(lines)


def render_defects(error: CommitParseError) -> str:
    if isinstance(error, InvalidCommitError):
        return "\n".join(f"  {escape(d.message)}" for d in error.defects)
    return f"  {escape(str(error))}"
