"""
Unit tests for documentation/metadata file classification
"""

import pytest
from time_to_review.file_filters import FileFilter, file_extension
from time_to_review.models import FileChange


class TestFileExtension:
    """Test cases for extension extraction."""

    def test_simple_extension(self):
        """Test a regular filename."""
        assert file_extension('src/App.TS') == 'ts'

    def test_no_extension(self):
        """Test that a name without a dot yields the whole name."""
        assert file_extension('Makefile') == 'makefile'

    def test_multiple_dots(self):
        """Test that only the last dot counts."""
        assert file_extension('bundle.min.js') == 'js'


class TestIsDocOrMetadata:
    """Test cases for FileFilter.is_doc_or_metadata."""

    @pytest.fixture
    def file_filter(self):
        return FileFilter()

    @pytest.mark.parametrize('filename', [
        'guide.md',
        'notes.TXT',
        'api.rst',
        'manual.adoc',
    ])
    def test_doc_extensions(self, file_filter, filename):
        """Test documentation extensions."""
        assert file_filter.is_doc_or_metadata(filename)

    @pytest.mark.parametrize('filename', [
        'README',
        'CHANGELOG',
        'LICENSE',
        'CONTRIBUTING',
        'AUTHORS',
        'pkg/ReadMe.html',
    ])
    def test_doc_name_tokens(self, file_filter, filename):
        """Test well-known documentation names regardless of case."""
        assert file_filter.is_doc_or_metadata(filename)

    @pytest.mark.parametrize('filename', [
        '.gitignore',
        'web/package.json',
        'package-lock.json',
        'yarn.lock',
        'tsconfig.json',
        '.github/workflows/ci.yml',
        '.vscode/settings.json',
        '.idea/workspace.xml',
        '.eslintrc.js',
    ])
    def test_metadata_files(self, file_filter, filename):
        """Test lockfiles, manifests and editor/CI config."""
        assert file_filter.is_doc_or_metadata(filename)

    @pytest.mark.parametrize('filename', [
        'docs/index.html',
        'documentation/setup.py',
        'wiki/page.js',
    ])
    def test_doc_directories(self, file_filter, filename):
        """Test documentation directory prefixes."""
        assert file_filter.is_doc_or_metadata(filename)

    def test_doc_directory_prefix_is_case_sensitive(self, file_filter):
        """Test that directory prefixes are matched as written."""
        assert not file_filter.is_doc_or_metadata('Docs/index.html')

    @pytest.mark.parametrize('filename', [
        'src/app.ts',
        'util.py',
        'Makefile',
        'src/main/java/Example.java',
    ])
    def test_code_files(self, file_filter, filename):
        """Test that source files are not documentation."""
        assert not file_filter.is_doc_or_metadata(filename)

    def test_custom_patterns(self):
        """Test extra fnmatch patterns."""
        file_filter = FileFilter(['*.svg', 'examples/*'])
        assert file_filter.is_doc_or_metadata('logo.svg')
        assert file_filter.is_doc_or_metadata('examples/demo.py')
        assert not file_filter.is_doc_or_metadata('src/demo.py')


class TestIsComplex:
    """Test cases for FileFilter.is_complex."""

    def test_source_extensions(self):
        """Test complex source extensions."""
        file_filter = FileFilter()
        for filename in ['a.js', 'a.jsx', 'a.ts', 'a.tsx', 'a.py', 'A.java', 'a.cpp', 'a.c', 'a.go', 'a.rs']:
            assert file_filter.is_complex(filename), filename

    def test_other_code_is_not_complex(self):
        """Test code files outside the complex set."""
        assert not FileFilter().is_complex('styles.css')
        assert not FileFilter().is_complex('Makefile')

    def test_doc_files_never_complex(self):
        """Test that a source extension inside docs/ does not count."""
        assert not FileFilter().is_complex('docs/conf.py')


class TestAllDocOrMetadata:
    """Test cases for FileFilter.all_doc_or_metadata."""

    def test_all_docs(self):
        """Test a documentation-only change set."""
        assert FileFilter().all_doc_or_metadata(['docs/a.md', 'CHANGELOG.md', 'README'])

    def test_mixed(self):
        """Test a change set containing code."""
        assert not FileFilter().all_doc_or_metadata(['README.md', 'src/app.py'])

    def test_empty(self):
        """Test that no files counts as documentation-only."""
        assert FileFilter().all_doc_or_metadata([])


class TestWeightedLineCounts:
    """Test cases for weighted line counting."""

    def test_doc_lines_discounted(self):
        """Test that doc lines count one fifth of code lines."""
        files = [
            FileChange('src/app.py', 100, 50),
            FileChange('README.md', 100, 50),
        ]
        result = FileFilter().calculate_weighted_line_counts(files)
        assert result['additions'] == pytest.approx(120)
        assert result['deletions'] == pytest.approx(60)
        assert result['doc_files'] == 1

    def test_empty(self):
        """Test no files."""
        result = FileFilter().calculate_weighted_line_counts([])
        assert result == {'additions': 0.0, 'deletions': 0.0, 'doc_files': 0}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
