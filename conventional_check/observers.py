"""Observer pattern for commit message checks."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .errors import CommitParseError, InvalidCommitError
from .models import ConventionalCommit
from .parser import parse
from .render import render_commit, render_defects


def _header_line(message: str) -> str:
    return message.split("\n", 1)[0]


class ParseObserver(ABC):
    """Abstract base class for parse observers."""

    @abstractmethod
    def on_commit_parsed(self, commit: ConventionalCommit) -> None:
        """Called when a message parsed and validated cleanly."""
        pass

    @abstractmethod
    def on_commit_rejected(self, message: str, error: CommitParseError) -> None:
        """Called when a message was rejected."""
        pass


class ConsoleLogObserver(ParseObserver):
    """Observer that reports checks to the console."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or Console(emoji=False)
        self.error_console = error_console or Console(stderr=True, emoji=False)

    def on_commit_parsed(self, commit: ConventionalCommit) -> None:
        self.console.print("[green]Conventional Commit parsed successfully:[/green]")
        self.console.print(render_commit(commit))

    def on_commit_rejected(self, message: str, error: CommitParseError) -> None:
        self.error_console.print("[red]Conventional Commit: commit is not valid:[/red]")
        self.error_console.print(f"[red]{render_defects(error)}[/red]")


class FileLogObserver(ParseObserver):
    """Observer that logs checks to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_commit_parsed(self, commit: ConventionalCommit) -> None:
        scope = f"({commit.scope})" if commit.scope else ""
        bang = "!" if commit.is_breaking_change else ""
        self._log(f"Valid commit: {commit.commit_type.label}{scope}{bang}: {commit.summary}")

    def on_commit_rejected(self, message: str, error: CommitParseError) -> None:
        if isinstance(error, InvalidCommitError):
            reasons = "; ".join(d.message for d in error.defects)
        else:
            reasons = str(error)
        self._log(f"Rejected commit '{_header_line(message)}': {reasons}")


class CommitChecker:
    """Parses commit messages and notifies observers of the outcome.

    Attributes:
        observers (List[ParseObserver]): List of observers to notify
    """

    def __init__(self, observers: Optional[List[ParseObserver]] = None):
        self.observers: List[ParseObserver] = list(observers or [])

    def add_observer(self, observer: ParseObserver) -> None:
        self.observers.append(observer)

    def remove_observer(self, observer: ParseObserver) -> None:
        self.observers.remove(observer)

    def check(self, message: str) -> ConventionalCommit:
        """Parse a message, notifying observers before returning or raising.

        Raises:
            CommitParseError: If the message is malformed or invalid
        """
        try:
            commit = parse(message)
        except CommitParseError as e:
            for observer in self.observers:
                observer.on_commit_rejected(message, e)
            raise
        for observer in self.observers:
            observer.on_commit_parsed(commit)
        return commit
