# -*- coding: ascii -*-
"""
Assertion helpers for test suites.

    def test_no_mixed_scripts():
        assert_all_files_scripts_ok('src', 'docs')
"""

from typing import Iterable, Optional, Sequence

from .batch import scan_tree
from .scanner import scan_file
from .schema import DEFAULT_MARKER


def assert_file_scripts_ok(path, *scripts: str, marker: str = DEFAULT_MARKER) -> None:
    """Fail with the diagnostic message if path mixes disallowed scripts."""
    result = scan_file(path, scripts, marker)
    if not result.ok:
        raise AssertionError(result.message)


def assert_all_files_scripts_ok(*roots, scripts: Optional[Sequence[str]] = None,
                                marker: str = DEFAULT_MARKER,
                                exclude_dirs: Optional[Iterable[str]] = None) -> None:
    """Scan roots (default: current directory) and fail listing every bad file."""
    outcomes = scan_tree(roots or None, scripts, marker=marker, exclude_dirs=exclude_dirs)
    problems = [o.message for o in outcomes if not o.ok]
    if problems:
        raise AssertionError(
            f"{len(problems)} of {len(outcomes)} files failed the script check:\n"
            + "\n".join(problems)
        )
