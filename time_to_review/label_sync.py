"""Keeps exactly one review time label on a pull request."""

import logging
import re
from typing import List

from .exceptions import LabelNotFoundError
from .models import ReviewEstimate


TIME_LABEL_PATTERN = re.compile(r'^\d+ min review$')


def is_time_label(name: str) -> bool:
    return bool(TIME_LABEL_PATTERN.match(name or ''))


class LabelSynchronizer:
    """Replaces stale review time labels with the estimated one.

    The steps run strictly in order: remove old time labels, optionally make
    sure the label exists with the right color, then apply it. Nothing is
    rolled back if a later step fails.
    """

    def __init__(self, pull_request, manage_color: bool = False):
        """Initialize the synchronizer.

        Args:
            pull_request: Handle exposing the pull request label operations
            manage_color: Create or recolor the repository label before applying it
        """
        self.pull_request = pull_request
        self.manage_color = manage_color

    def remove_stale_labels(self) -> List[str]:
        """Remove every review time label currently on the pull request.

        Returns:
            Names of the labels that were removed
        """
        current_labels = [label.get('name', '') for label in self.pull_request.list_labels()]
        time_labels = [name for name in current_labels if is_time_label(name)]

        removed = []
        for name in time_labels:
            try:
                self.pull_request.remove_label(name)
            except LabelNotFoundError:
                logging.debug(f"Label '{name}' was already removed")
                continue
            removed.append(name)
            logging.info(f"Removed label '{name}'")

        return removed

    def ensure_label_definition(self, name: str, color: str):
        """Create the repository label, or update its color if it already exists."""
        try:
            self.pull_request.get_label_definition(name)
        except LabelNotFoundError:
            logging.info(f"Creating label '{name}' with color #{color}")
            self.pull_request.create_label_definition(name, color)
            return

        logging.debug(f"Updating color of label '{name}' to #{color}")
        self.pull_request.update_label_definition(name, color)

    def apply_label(self, name: str):
        self.pull_request.add_label(name)
        logging.info(f"Applied label '{name}'")

    def sync_label(self, name: str, color: str = None):
        """Make `name` the only review time label on the pull request.

        Args:
            name: Label to apply, e.g. '10 min review'
            color: Hex color without '#'; used only when managing colors
        """
        self.remove_stale_labels()
        if self.manage_color and color:
            self.ensure_label_definition(name, color)
        self.apply_label(name)

    def sync(self, estimate: ReviewEstimate):
        self.sync_label(estimate.label, estimate.color)
