"""GitHub API client for making requests and handling pagination."""

import os
import logging
from typing import Dict, List, Optional, Callable
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import RateLimitError


DEFAULT_API_URL = 'https://api.github.com'


class GitHubAPIClient:
    """Handles GitHub API requests with retry logic and pagination."""

    def __init__(self, token: str = None, api_url: str = None):
        """Initialize the GitHub API client.

        Args:
            token: GitHub token for authentication
            api_url: Base URL of the REST API (GitHub Enterprise installs differ)
        """
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.api_url = (api_url or DEFAULT_API_URL).rstrip('/')
        self.session = requests.Session()

        # Only idempotent requests are retried, and only on server errors
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504]
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})

        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Label changes will be rejected.")
            logging.warning("Set GITHUB_TOKEN environment variable or pass token as argument.")

    def url(self, path: str) -> str:
        """Build an absolute API URL from a path like '/repos/owner/name'."""
        return f"{self.api_url}/{path.lstrip('/')}"

    def check_response(self, response: requests.Response) -> requests.Response:
        """Raise for failed responses, turning 403s into RateLimitError."""
        if response.status_code == 403:
            logging.error(f"Request forbidden or rate limit exceeded. Response: {response.text}")
            raise RateLimitError(
                f"GitHub API refused {response.request.method} {response.url}: {response.text}",
                status_code=403,
            )
        response.raise_for_status()
        return response

    def get_paginated(self, url: str, params: Dict = None,
                      should_continue: Optional[Callable[[List[Dict]], bool]] = None) -> List[Dict]:
        """Fetch all pages of a paginated GitHub API endpoint.

        Args:
            url: The API endpoint URL
            params: Query parameters
            should_continue: Optional callback function that takes a page of results and returns
                           False to stop pagination early, True to continue

        Returns:
            List of all items from all pages
        """
        results = []
        page = 1
        per_page = 100

        params = dict(params or {})
        params['per_page'] = per_page

        while True:
            params['page'] = page
            logging.debug(f"Fetching page {page} from {url}")
            response = self.check_response(self.session.get(url, params=params))
            data = response.json()

            if not data:
                break

            results.extend(data)

            # Check early termination callback
            if should_continue and not should_continue(data):
                logging.debug(f"Early termination triggered at page {page}")
                break

            # Check if there are more pages
            if len(data) < per_page:
                break

            page += 1

        logging.debug(f"Fetched {len(results)} total items from {url}")
        return results

    def get(self, url: str) -> requests.Response:
        """Make a single GET request to the GitHub API.

        Args:
            url: The API endpoint URL

        Returns:
            Response object (not checked; callers inspect the status)
        """
        return self.session.get(url)

    def get_json(self, url: str) -> Dict:
        """GET a URL and return the decoded JSON body, raising on failure."""
        return self.check_response(self.session.get(url)).json()

    def post_json(self, url: str, payload: Dict) -> Dict:
        """POST a JSON payload and return the decoded response body."""
        return self.check_response(self.session.post(url, json=payload)).json()

    def patch_json(self, url: str, payload: Dict) -> Dict:
        """PATCH a JSON payload and return the decoded response body."""
        return self.check_response(self.session.patch(url, json=payload)).json()

    def delete(self, url: str) -> requests.Response:
        """Make a DELETE request. The response is returned unchecked."""
        return self.session.delete(url)
