"""Data models for pull request review time estimation."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class CommitType(Enum):
    """Conventional commit types that carry review weight."""
    FEAT = 'feat'
    FIX = 'fix'
    REFACTOR = 'refactor'
    REVERT = 'revert'
    DOCS = 'docs'
    OTHER = 'other'


@dataclass(frozen=True)
class ParsedCommitMessage:
    """First line of a commit message split into its conventional parts."""
    commit_type: CommitType
    scope: Optional[str] = None
    description: str = ''
    is_conventional: bool = False


@dataclass(frozen=True)
class FileChange:
    """A file changed by the pull request."""
    path: str
    additions: int = 0
    deletions: int = 0

    @property
    def changed_lines(self) -> int:
        return self.additions + self.deletions

    @classmethod
    def from_api(cls, file: Dict) -> 'FileChange':
        """Build from a GitHub `pulls/{n}/files` entry, treating absent values as empty."""
        return cls(
            path=file.get('filename') or '',
            additions=file.get('additions') or 0,
            deletions=file.get('deletions') or 0,
        )


@dataclass(frozen=True)
class Commit:
    """A commit on the pull request. Stats are None when the API did not report them."""
    message: str = ''
    additions: Optional[int] = None
    deletions: Optional[int] = None

    @property
    def first_line(self) -> str:
        lines = self.message.splitlines()
        return lines[0] if lines else ''

    @property
    def has_stats(self) -> bool:
        return self.additions is not None and self.deletions is not None

    @property
    def changed_lines(self) -> Optional[int]:
        if not self.has_stats:
            return None
        return self.additions + self.deletions

    @classmethod
    def from_api(cls, commit: Dict) -> 'Commit':
        """Build from a GitHub commit object (list or single-commit form)."""
        message = (commit.get('commit') or {}).get('message') or ''
        stats = commit.get('stats')
        if not stats:
            return cls(message=message)
        return cls(
            message=message,
            additions=stats.get('additions') or 0,
            deletions=stats.get('deletions') or 0,
        )


@dataclass(frozen=True)
class PullRequestSnapshot:
    """Read-only view of everything the estimator looks at."""
    description: str = ''
    files: Tuple[FileChange, ...] = ()
    commits: Tuple[Commit, ...] = ()

    @property
    def description_length(self) -> int:
        return len(self.description)

    @classmethod
    def from_api(cls, pull_request: Dict, commits: List[Dict], files: List[Dict]) -> 'PullRequestSnapshot':
        """Assemble a snapshot from raw GitHub API responses.

        Args:
            pull_request: Response of `GET /repos/{repo}/pulls/{n}`
            commits: Commit objects, optionally carrying `stats`
            files: Entries of `GET /repos/{repo}/pulls/{n}/files`

        Returns:
            Snapshot with absent fields normalized to empty values
        """
        pull_request = pull_request or {}
        return cls(
            description=pull_request.get('body') or '',
            files=tuple(FileChange.from_api(f) for f in files or []),
            commits=tuple(Commit.from_api(c) for c in commits or []),
        )


@dataclass
class ScoreBreakdown:
    """Contribution of each factor to the review score, in minutes."""
    file_count: float = 0.0
    line_volume: float = 0.0
    complex_files: float = 0.0
    commit_types: float = 0.0
    unconventional_commits: float = 0.0
    large_commits: float = 0.0
    description: float = 0.0
    docs_only: bool = False

    @property
    def total(self) -> float:
        return (self.file_count + self.line_volume + self.complex_files
                + self.commit_types + self.unconventional_commits
                + self.large_commits + self.description)

    def as_rows(self) -> List[Tuple[str, float]]:
        """Factor name/value pairs in display order."""
        return [
            ('Code files', self.file_count),
            ('Changed lines', self.line_volume),
            ('Complex files', self.complex_files),
            ('Commit types', self.commit_types),
            ('Unconventional commits', self.unconventional_commits),
            ('Large commits', self.large_commits),
            ('Short description', self.description),
        ]


@dataclass(frozen=True)
class ReviewEstimate:
    """Estimated review time for a pull request."""
    score: float
    minutes: int
    bucket: int
    color: str
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown, compare=False)

    @property
    def label(self) -> str:
        return f"{self.bucket} min review"
