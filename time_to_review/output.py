"""Console output for review time estimates."""

from .estimator import GREEN as GREEN_LABEL, YELLOW as YELLOW_LABEL
from .models import PullRequestSnapshot, ReviewEstimate


# ANSI color codes
GREEN = '\033[92m'
YELLOW = '\033[93m'
RED = '\033[91m'
CYAN = '\033[96m'
BOLD = '\033[1m'
RESET = '\033[0m'


class OutputFormatter:
    """Formats and prints an estimate and how it was reached."""

    def __init__(self, title: str = None, use_colors: bool = True):
        """Initialize the output formatter.

        Args:
            title: Heading for the summary, e.g. 'owner/repo#12'
            use_colors: Whether to emit ANSI color codes
        """
        self.title = title
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{RESET}"

    def _label_color(self, estimate: ReviewEstimate) -> str:
        if estimate.color == GREEN_LABEL:
            return GREEN
        if estimate.color == YELLOW_LABEL:
            return YELLOW
        return RED

    def format_estimate(self, estimate: ReviewEstimate, snapshot: PullRequestSnapshot = None) -> str:
        """Build the summary text for an estimate.

        Args:
            estimate: The computed estimate
            snapshot: The snapshot it was computed from, for the size line

        Returns:
            Multi-line summary
        """
        lines = ["=" * 60]
        heading = "REVIEW TIME ESTIMATE"
        if self.title:
            heading += f" FOR {self.title}"
        lines.append(self._colorize(heading, BOLD))
        lines.append("=" * 60)

        if snapshot is not None:
            additions = sum(f.additions for f in snapshot.files)
            deletions = sum(f.deletions for f in snapshot.files)
            lines.append(f"{len(snapshot.files)} file(s), {len(snapshot.commits)} commit(s), "
                         f"+{additions:,}/-{deletions:,} lines")

        if estimate.breakdown.docs_only:
            lines.append("Documentation/metadata changes only")
        else:
            for name, value in estimate.breakdown.as_rows():
                lines.append(f"  {name:<24} {value:>6.2f}")
            lines.append(f"  {'Score':<24} {estimate.score:>6.2f}")

        lines.append(f"Estimated minutes: {estimate.minutes}")
        label = self._colorize(estimate.label, self._label_color(estimate))
        lines.append(f"Label: {label} " + self._colorize(f"(#{estimate.color})", CYAN))
        return "\n".join(lines)

    def print_estimate(self, estimate: ReviewEstimate, snapshot: PullRequestSnapshot = None):
        print(self.format_estimate(estimate, snapshot))
