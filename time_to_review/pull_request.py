"""Pull request and label operations against the GitHub REST API."""

import logging
from typing import Dict, List
from urllib.parse import quote

from .api_client import GitHubAPIClient
from .exceptions import LabelNotFoundError
from .models import PullRequestSnapshot


class PullRequest:
    """A single pull request in a repository, bound to an API client."""

    def __init__(self, api_client: GitHubAPIClient, repo: str, number: int,
                 fetch_commit_stats: bool = True):
        """Initialize the pull request handle.

        Args:
            api_client: Client used for every request
            repo: Repository in 'owner/name' form
            number: Pull request number
            fetch_commit_stats: Fetch additions/deletions of each commit separately,
                since the pull request commit listing does not include them
        """
        self.api_client = api_client
        self.repo = repo
        self.number = number
        self.fetch_commit_stats = fetch_commit_stats

    def __repr__(self):
        return f"PullRequest({self.repo}#{self.number})"

    def _repo_url(self, path: str = '') -> str:
        return self.api_client.url(f"/repos/{self.repo}{path}")

    @staticmethod
    def _quote_label(name: str) -> str:
        return quote(name, safe='')

    def get_pull_request(self) -> Dict:
        return self.api_client.get_json(self._repo_url(f"/pulls/{self.number}"))

    def list_commits(self) -> List[Dict]:
        return self.api_client.get_paginated(self._repo_url(f"/pulls/{self.number}/commits"))

    def get_commit_stats(self, sha: str) -> Dict:
        """Return the 'stats' block ({additions, deletions, total}) of one commit."""
        commit = self.api_client.get_json(self._repo_url(f"/commits/{sha}"))
        return commit.get('stats') or {}

    def list_changed_files(self) -> List[Dict]:
        return self.api_client.get_paginated(self._repo_url(f"/pulls/{self.number}/files"))

    def list_labels(self) -> List[Dict]:
        return self.api_client.get_paginated(self._repo_url(f"/issues/{self.number}/labels"))

    def remove_label(self, name: str):
        """Remove a label from the pull request.

        Raises:
            LabelNotFoundError: If the label is not on the pull request
        """
        url = self._repo_url(f"/issues/{self.number}/labels/{self._quote_label(name)}")
        response = self.api_client.delete(url)
        if response.status_code == 404:
            raise LabelNotFoundError(f"Label '{name}' is not on {self}", status_code=404)
        self.api_client.check_response(response)

    def add_label(self, name: str) -> List[Dict]:
        url = self._repo_url(f"/issues/{self.number}/labels")
        return self.api_client.post_json(url, {'labels': [name]})

    def get_label_definition(self, name: str) -> Dict:
        """Fetch a repository label.

        Raises:
            LabelNotFoundError: If the repository has no label with that name
        """
        response = self.api_client.get(self._repo_url(f"/labels/{self._quote_label(name)}"))
        if response.status_code == 404:
            raise LabelNotFoundError(f"Label '{name}' does not exist in {self.repo}", status_code=404)
        return self.api_client.check_response(response).json()

    def create_label_definition(self, name: str, color: str) -> Dict:
        return self.api_client.post_json(self._repo_url("/labels"), {'name': name, 'color': color})

    def update_label_definition(self, name: str, color: str) -> Dict:
        url = self._repo_url(f"/labels/{self._quote_label(name)}")
        return self.api_client.patch_json(url, {'color': color})

    def snapshot(self) -> PullRequestSnapshot:
        """Fetch description, commits and changed files into a snapshot.

        Returns:
            PullRequestSnapshot of the pull request as it is now
        """
        pull_request = self.get_pull_request()
        commits = self.list_commits()
        files = self.list_changed_files()
        logging.info(f"{self}: {len(commits)} commit(s), {len(files)} changed file(s)")

        if self.fetch_commit_stats:
            # The listing omits stats; fetch them one commit at a time
            commits = [
                dict(commit, stats=self.get_commit_stats(commit['sha'])) if commit.get('sha') else commit
                for commit in commits
            ]

        return PullRequestSnapshot.from_api(pull_request, commits, files)
