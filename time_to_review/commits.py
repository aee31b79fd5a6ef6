"""Conventional commit parsing."""

import re

from .models import CommitType, ParsedCommitMessage


CONVENTIONAL_TYPES = [
    'feat', 'fix', 'docs', 'style', 'refactor', 'perf',
    'test', 'build', 'ci', 'chore', 'revert',
]

# type(scope): description
CONVENTIONAL_PATTERN = re.compile(
    r'^(?P<type>' + '|'.join(CONVENTIONAL_TYPES) + r')'
    r'(?:\((?P<scope>[a-zA-Z0-9\-_]+)\))?'
    r': (?P<description>.+)'
)

_WEIGHTED_TYPES = {
    'feat': CommitType.FEAT,
    'fix': CommitType.FIX,
    'refactor': CommitType.REFACTOR,
    'revert': CommitType.REVERT,
    'docs': CommitType.DOCS,
}


def parse_commit_message(first_line: str) -> ParsedCommitMessage:
    """Parse the first line of a commit message.

    Conventional types without a review weight (chore, ci, ...) parse as
    OTHER but still count as conventional.

    Args:
        first_line: First line of the commit message

    Returns:
        ParsedCommitMessage; non-matching lines are OTHER and not conventional
    """
    match = CONVENTIONAL_PATTERN.match(first_line or '')
    if not match:
        return ParsedCommitMessage(commit_type=CommitType.OTHER)

    return ParsedCommitMessage(
        commit_type=_WEIGHTED_TYPES.get(match.group('type'), CommitType.OTHER),
        scope=match.group('scope'),
        description=match.group('description'),
        is_conventional=True,
    )
