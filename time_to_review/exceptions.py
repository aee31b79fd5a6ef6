"""Errors raised while talking to the GitHub API."""


class GitHubAPIError(Exception):
    """A GitHub API request failed."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(GitHubAPIError):
    """The API refused the request (rate limit or missing permissions)."""


class LabelNotFoundError(GitHubAPIError):
    """The label does not exist on the repository or the pull request."""
