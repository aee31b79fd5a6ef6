"""File classification utilities for telling documentation apart from code."""

import fnmatch
import logging
from typing import Iterable, List, Dict

from .models import FileChange


DOC_EXTENSIONS = {'md', 'txt', 'rst', 'adoc'}

# Matched as case-insensitive substrings of the path
DOC_NAME_TOKENS = [
    'readme',
    'changelog',
    'license',
    'contributing',
    'authors',
]

METADATA_FILE_TOKENS = [
    '.gitignore',
    '.editorconfig',
    '.prettierrc',
    '.eslintrc',
    'package.json',
    'package-lock.json',
    'yarn.lock',
    'tsconfig.json',
    'tslint.json',
    '.npmrc',
    '.npmignore',
    '.github',
    '.vscode',
    '.idea',
]

DOC_DIRECTORY_PREFIXES = ('docs/', 'documentation/', 'wiki/')

COMPLEX_EXTENSIONS = {'js', 'jsx', 'ts', 'tsx', 'py', 'java', 'cpp', 'c', 'go', 'rs'}

DOC_LINE_WEIGHT = 0.2
CODE_LINE_WEIGHT = 1.0


def file_extension(path: str) -> str:
    """Return the lowercased text after the last dot (the whole path if there is none)."""
    return path.rsplit('.', 1)[-1].lower()


class FileFilter:
    """Classifies changed files as documentation/metadata or code."""

    def __init__(self, doc_file_patterns: List[str] = None):
        """Initialize the file filter.

        Args:
            doc_file_patterns: Extra fnmatch patterns that also mark a file as documentation
        """
        self.doc_file_patterns = list(doc_file_patterns or [])

    def match_pattern(self, filename: str, pattern: str) -> bool:
        """Check if a filename matches a pattern (supports * wildcards).

        Args:
            filename: The filename to check
            pattern: The pattern to match against

        Returns:
            True if the filename matches the pattern, False otherwise
        """
        return fnmatch.fnmatch(filename, pattern)

    def is_doc_or_metadata(self, filename: str) -> bool:
        """Check if a file is documentation or project metadata rather than source code.

        Args:
            filename: Repository-relative path of the file

        Returns:
            True if any of the documentation/metadata rules match
        """
        lowered = filename.lower()

        if file_extension(filename) in DOC_EXTENSIONS:
            return True

        if any(token in lowered for token in DOC_NAME_TOKENS):
            return True

        if any(token in lowered for token in METADATA_FILE_TOKENS):
            return True

        if filename.startswith(DOC_DIRECTORY_PREFIXES):
            return True

        return any(
            self.match_pattern(filename, pattern)
            for pattern in self.doc_file_patterns
        )

    def is_complex(self, filename: str) -> bool:
        """Check if a code file has a source extension that takes longer to review."""
        if self.is_doc_or_metadata(filename):
            return False
        return file_extension(filename) in COMPLEX_EXTENSIONS

    def all_doc_or_metadata(self, filenames: Iterable[str]) -> bool:
        """True when every file is documentation/metadata (and for no files at all)."""
        return all(self.is_doc_or_metadata(name) for name in filenames)

    def calculate_weighted_line_counts(self, files: Iterable[FileChange]) -> Dict[str, float]:
        """Calculate changed line counts with documentation lines discounted.

        Args:
            files: Changed files of the pull request

        Returns:
            Dictionary with weighted 'additions', 'deletions' and 'doc_files' count
        """
        weighted_additions = 0.0
        weighted_deletions = 0.0
        doc_files_count = 0

        for file in files:
            filename = file.path
            additions = file.additions
            deletions = file.deletions

            if self.is_doc_or_metadata(filename):
                weight = DOC_LINE_WEIGHT
                doc_files_count += 1
                logging.debug(f"Discounting doc file: {filename} (+{additions}/-{deletions})")
            else:
                weight = CODE_LINE_WEIGHT

            weighted_additions += additions * weight
            weighted_deletions += deletions * weight

        if doc_files_count > 0:
            logging.debug(f"Discounted {doc_files_count} documentation/metadata file(s)")

        return {
            'additions': weighted_additions,
            'deletions': weighted_deletions,
            'doc_files': doc_files_count,
        }
