"""Time to Review - labels pull requests with an estimated review time."""

from .models import (
    CommitType,
    Commit,
    FileChange,
    PullRequestSnapshot,
    ReviewEstimate,
    ScoreBreakdown,
)
from .api_client import GitHubAPIClient
from .file_filters import FileFilter
from .estimator import ReviewTimeEstimator, select_bucket, color_for_minutes, TIME_BUCKETS
from .label_sync import LabelSynchronizer, is_time_label
from .pull_request import PullRequest
from .exceptions import GitHubAPIError, LabelNotFoundError, RateLimitError
from .output import OutputFormatter

__all__ = [
    'CommitType',
    'Commit',
    'FileChange',
    'PullRequestSnapshot',
    'ReviewEstimate',
    'ScoreBreakdown',
    'GitHubAPIClient',
    'FileFilter',
    'ReviewTimeEstimator',
    'select_bucket',
    'color_for_minutes',
    'TIME_BUCKETS',
    'LabelSynchronizer',
    'is_time_label',
    'PullRequest',
    'GitHubAPIError',
    'LabelNotFoundError',
    'RateLimitError',
    'OutputFormatter',
]
