"""
Action configuration.

Settings come from environment variables (a `.env` file is loaded first by
the entry point). Inside GitHub Actions the pull request number is read from
the event payload when PR_NUMBER is not set.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .api_client import DEFAULT_API_URL


class ConfigError(ValueError):
    """Configuration is missing or invalid."""


def _is_true(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ('true', '1', 'yes')


def _split_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


def _read_event_payload(event_path: Optional[str]) -> Dict:
    """Load the GitHub Actions event JSON, or an empty dict if unavailable."""
    if not event_path or not os.path.exists(event_path):
        return {}

    try:
        with open(event_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logging.warning(f"Could not read event payload from {event_path}: {e}")
        return {}


@dataclass
class ActionConfig:
    """Settings for one run of the action."""
    repo: str
    pr_number: int
    token: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    manage_label_color: bool = False
    fetch_commit_stats: bool = True
    doc_file_patterns: List[str] = field(default_factory=list)
    dry_run: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'ActionConfig':
        """Build the configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            ActionConfig

        Raises:
            ConfigError: If the repository or pull request number is missing or invalid
        """
        env = os.environ if environ is None else environ

        # Actions exposes `with:` inputs as INPUT_<NAME>
        token = env.get('GITHUB_TOKEN') or env.get('INPUT_GITHUB-TOKEN') or env.get('INPUT_GITHUB_TOKEN')

        repo = (env.get('GITHUB_REPOSITORY') or '').strip()
        if repo.count('/') != 1 or repo.startswith('/') or repo.endswith('/'):
            raise ConfigError(f"GITHUB_REPOSITORY must look like 'owner/name', got '{repo}'")

        pr_number_env = (env.get('PR_NUMBER') or '').strip()
        if pr_number_env:
            try:
                pr_number = int(pr_number_env)
            except ValueError:
                raise ConfigError(f"Invalid PR_NUMBER value '{pr_number_env}'")
        else:
            payload = _read_event_payload(env.get('GITHUB_EVENT_PATH'))
            pr_number = (payload.get('pull_request') or {}).get('number')
            if pr_number is None:
                raise ConfigError("No pull request number: set PR_NUMBER or run on a pull_request event")

        doc_file_patterns = _split_list(env.get('DOC_FILE_PATTERNS'))
        if doc_file_patterns:
            logging.info(f"Using extra documentation file patterns: {', '.join(doc_file_patterns)}")

        config = cls(
            repo=repo,
            pr_number=int(pr_number),
            token=token,
            api_url=(env.get('GITHUB_API_URL') or DEFAULT_API_URL).strip(),
            manage_label_color=_is_true(env.get('MANAGE_LABEL_COLOR'), False),
            fetch_commit_stats=_is_true(env.get('FETCH_COMMIT_STATS'), True),
            doc_file_patterns=doc_file_patterns,
            dry_run=_is_true(env.get('DRY_RUN'), False),
        )

        if not config.token and not config.dry_run:
            raise ConfigError("GITHUB_TOKEN is required to change labels (or set DRY_RUN=true)")

        return config
