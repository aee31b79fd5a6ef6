"""
Unit tests for the action entry point
"""

import pytest
from unittest.mock import Mock, patch
from time_to_review import action
from time_to_review.config import ActionConfig
from time_to_review.exceptions import GitHubAPIError
from time_to_review.models import Commit, FileChange, PullRequestSnapshot


@pytest.fixture
def config():
    return ActionConfig(repo='owner/repo', pr_number=42, token='test_token')


@pytest.fixture
def pull_request():
    pull_request = Mock()
    pull_request.snapshot.return_value = PullRequestSnapshot(
        description='',
        files=(FileChange('util.py', 10, 0),),
        commits=(Commit('update stuff'),),
    )
    pull_request.list_labels.return_value = [{'name': 'bug'}, {'name': '30 min review'}]
    return pull_request


class TestRun:
    """Test cases for run()."""

    def test_applies_label(self, config, pull_request):
        """Test the full flow against a mocked pull request."""
        with patch('builtins.print'):
            estimate = action.run(config, pull_request)

        assert estimate.label == '5 min review'
        pull_request.remove_label.assert_called_once_with('30 min review')
        pull_request.add_label.assert_called_once_with('5 min review')
        pull_request.get_label_definition.assert_not_called()

    def test_manage_label_color(self, config, pull_request):
        """Test that the color-aware variant recolors the label."""
        config.manage_label_color = True
        pull_request.get_label_definition.return_value = {'name': '5 min review', 'color': 'ffffff'}

        with patch('builtins.print'):
            action.run(config, pull_request)

        pull_request.update_label_definition.assert_called_once_with('5 min review', 'fbca04')

    def test_dry_run(self, config, pull_request):
        """Test that a dry run changes no labels."""
        config.dry_run = True

        with patch('builtins.print'):
            estimate = action.run(config, pull_request)

        assert estimate.minutes == 4
        pull_request.list_labels.assert_not_called()
        pull_request.add_label.assert_not_called()

    def test_doc_file_patterns(self, config, pull_request):
        """Test that configured doc patterns reach the estimator."""
        config.doc_file_patterns = ['util.*']

        with patch('builtins.print'):
            estimate = action.run(config, pull_request)

        assert estimate.label == '1 min review'

    def test_builds_pull_request_from_config(self, config):
        """Test that a PullRequest is created when none is passed."""
        with patch('time_to_review.action.PullRequest') as pull_request_class, \
                patch('time_to_review.action.GitHubAPIClient') as client_class, \
                patch('builtins.print'):
            pull_request_class.return_value.snapshot.return_value = PullRequestSnapshot()
            pull_request_class.return_value.list_labels.return_value = []

            action.run(config)

        client_class.assert_called_once_with('test_token', 'https://api.github.com')
        pull_request_class.assert_called_once_with(
            client_class.return_value, 'owner/repo', 42, fetch_commit_stats=True
        )


class TestMain:
    """Test cases for main()."""

    @pytest.fixture(autouse=True)
    def no_dotenv(self):
        with patch('time_to_review.action.load_dotenv'):
            yield

    def test_success(self, monkeypatch):
        """Test a successful run exits normally."""
        monkeypatch.setenv('GITHUB_TOKEN', 'test_token')
        monkeypatch.setenv('GITHUB_REPOSITORY', 'owner/repo')
        monkeypatch.setenv('PR_NUMBER', '42')

        with patch('time_to_review.action.run') as run:
            action.main()

        config = run.call_args[0][0]
        assert config.repo == 'owner/repo'
        assert config.pr_number == 42

    def test_failure_exits_with_error(self, monkeypatch, caplog):
        """Test that failures are reported and exit with status 1."""
        monkeypatch.setenv('GITHUB_TOKEN', 'test_token')
        monkeypatch.setenv('GITHUB_REPOSITORY', 'owner/repo')
        monkeypatch.setenv('PR_NUMBER', '42')

        with patch('time_to_review.action.run', side_effect=GitHubAPIError('Bad credentials', 401)):
            with pytest.raises(SystemExit) as exc_info:
                action.main()

        assert exc_info.value.code == 1
        assert 'Action failed with error: Bad credentials' in caplog.text

    def test_config_error_exits(self, monkeypatch, caplog):
        """Test that configuration errors also fail the run."""
        monkeypatch.delenv('GITHUB_REPOSITORY', raising=False)
        monkeypatch.setenv('PR_NUMBER', '42')

        with pytest.raises(SystemExit) as exc_info:
            action.main()

        assert exc_info.value.code == 1
        assert 'GITHUB_REPOSITORY' in caplog.text


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
