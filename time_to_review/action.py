"""Entry point: estimate review time for a pull request and label it."""

import os
import sys
import logging
from dotenv import load_dotenv

from .api_client import GitHubAPIClient
from .config import ActionConfig
from .estimator import ReviewTimeEstimator
from .file_filters import FileFilter
from .label_sync import LabelSynchronizer
from .models import ReviewEstimate
from .output import OutputFormatter
from .pull_request import PullRequest


def configure_logging():
    """Configure logging (can be overridden by LOG_LEVEL environment variable)."""
    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s %(levelname)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p'
    )


def run(config: ActionConfig, pull_request=None) -> ReviewEstimate:
    """Estimate review time and sync the pull request's time label.

    Args:
        config: Action configuration
        pull_request: Collaborator handle; built from config when None

    Returns:
        The estimate that was applied (or would be, in a dry run)
    """
    if pull_request is None:
        api_client = GitHubAPIClient(config.token, config.api_url)
        pull_request = PullRequest(
            api_client,
            config.repo,
            config.pr_number,
            fetch_commit_stats=config.fetch_commit_stats
        )

    logging.info(f"Processing PR #{config.pr_number} in {config.repo}")

    snapshot = pull_request.snapshot()
    estimator = ReviewTimeEstimator(FileFilter(config.doc_file_patterns))
    estimate = estimator.estimate(snapshot)

    OutputFormatter(f"{config.repo}#{config.pr_number}").print_estimate(estimate, snapshot)

    if config.dry_run:
        logging.info(f"Dry run: not applying label '{estimate.label}'")
        return estimate

    logging.info(f"Applying label: {estimate.label}")
    synchronizer = LabelSynchronizer(pull_request, manage_color=config.manage_label_color)
    synchronizer.sync(estimate)
    logging.info("Label added successfully")
    return estimate


def main():
    """Main entry point for the script."""
    # Load environment variables from .env file if it exists
    load_dotenv()
    configure_logging()

    try:
        config = ActionConfig.from_env()
        run(config)
    except Exception as e:
        logging.error(f"Action failed with error: {e}")
        logging.debug("Traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
