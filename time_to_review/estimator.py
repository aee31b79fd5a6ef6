"""Review time estimation from pull request metadata."""

import logging
import math
from typing import List

from .commits import parse_commit_message
from .file_filters import FileFilter
from .models import CommitType, PullRequestSnapshot, ReviewEstimate, ScoreBreakdown


TIME_BUCKETS = [1, 5, 10, 15, 20, 30]

# Minutes added per factor
CODE_FILE_WEIGHT = 0.5
CODE_FILE_CAP = 15
LINE_WEIGHT = 0.01
LINE_CAP = 10
COMPLEX_FILE_WEIGHT = 0.5
UNCONVENTIONAL_COMMIT_WEIGHT = 0.5
LARGE_COMMIT_WEIGHT = 1
LARGE_COMMIT_THRESHOLD = 300
SHORT_DESCRIPTION_WEIGHT = 2
SHORT_DESCRIPTION_LENGTH = 50

COMMIT_TYPE_WEIGHTS = {
    CommitType.FEAT: 2,
    CommitType.FIX: 1.5,
    CommitType.REFACTOR: 2.5,
    CommitType.REVERT: 1,
    CommitType.DOCS: 0.5,
    CommitType.OTHER: 0,
}

GREEN = '0e8a16'
YELLOW = 'fbca04'
RED = 'd93f0b'


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike round()."""
    return int(math.floor(value + 0.5))


def select_bucket(minutes: int, buckets: List[int] = None) -> int:
    """Return the smallest bucket that is >= minutes, or the largest bucket."""
    buckets = buckets or TIME_BUCKETS
    for option in buckets:
        if minutes <= option:
            return option
    return buckets[-1]


def label_for_bucket(bucket: int) -> str:
    return f"{bucket} min review"


def color_for_minutes(minutes: float) -> str:
    """Label color keyed on the raw minutes, not the bucket."""
    if minutes <= 1:
        return GREEN
    if minutes <= 10:
        return YELLOW
    return RED


class ReviewTimeEstimator:
    """Scores a pull request snapshot and maps the score to a review time bucket."""

    def __init__(self, file_filter: FileFilter = None):
        """Initialize the estimator.

        Args:
            file_filter: Classifier for documentation files (uses defaults if None)
        """
        self.file_filter = file_filter or FileFilter()

    def estimate(self, snapshot: PullRequestSnapshot) -> ReviewEstimate:
        """Estimate the review time of a pull request.

        Args:
            snapshot: Description, commits and changed files of the pull request

        Returns:
            ReviewEstimate with minutes, bucket and label color
        """
        breakdown = self.score(snapshot)
        if breakdown.docs_only:
            minutes = 1
        else:
            minutes = max(1, round_half_up(breakdown.total))

        bucket = select_bucket(minutes)
        estimate = ReviewEstimate(
            score=breakdown.total,
            minutes=minutes,
            bucket=bucket,
            color=color_for_minutes(minutes),
            breakdown=breakdown,
        )
        logging.info(f"Estimated review time: {minutes} minutes (score {breakdown.total:.2f})")
        return estimate

    def score(self, snapshot: PullRequestSnapshot) -> ScoreBreakdown:
        """Compute the contribution of every factor for a snapshot."""
        breakdown = ScoreBreakdown()

        if self.file_filter.all_doc_or_metadata(f.path for f in snapshot.files):
            logging.info("Only documentation or metadata files changed")
            breakdown.docs_only = True
            return breakdown

        code_files = [f for f in snapshot.files if not self.file_filter.is_doc_or_metadata(f.path)]
        breakdown.file_count = min(len(code_files) * CODE_FILE_WEIGHT, CODE_FILE_CAP)

        line_counts = self.file_filter.calculate_weighted_line_counts(snapshot.files)
        total_lines = line_counts['additions'] + line_counts['deletions']
        breakdown.line_volume = min(total_lines * LINE_WEIGHT, LINE_CAP)

        complex_files = sum(1 for f in code_files if self.file_filter.is_complex(f.path))
        breakdown.complex_files = complex_files * COMPLEX_FILE_WEIGHT

        self._score_commits(snapshot, breakdown)

        if snapshot.description_length < SHORT_DESCRIPTION_LENGTH:
            breakdown.description = SHORT_DESCRIPTION_WEIGHT

        return breakdown

    def _score_commits(self, snapshot: PullRequestSnapshot, breakdown: ScoreBreakdown):
        """Add commit type, unconventional and large commit factors."""
        unconventional_commits = 0
        large_commits = 0

        for commit in snapshot.commits:
            parsed = parse_commit_message(commit.first_line)
            if not parsed.is_conventional:
                unconventional_commits += 1
                logging.debug(f"Unconventional commit message: {commit.first_line!r}")

            breakdown.commit_types += COMMIT_TYPE_WEIGHTS[parsed.commit_type]

            # Commits without stats skip the size check
            if commit.has_stats and commit.changed_lines > LARGE_COMMIT_THRESHOLD:
                large_commits += 1

        breakdown.unconventional_commits = unconventional_commits * UNCONVENTIONAL_COMMIT_WEIGHT
        breakdown.large_commits = large_commits * LARGE_COMMIT_WEIGHT
