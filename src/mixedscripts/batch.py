# -*- coding: ascii -*-
"""Scanning many files, optionally across worker processes."""

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .directives import DirectiveParser
from .errors import ConfigurationError, ScanIOError
from .predicate import build_predicate
from .scanner import scan_file
from .schema import DEFAULT_MARKER, DEFAULT_SCRIPTS, STATUS_ERROR, STATUS_FAIL, STATUS_PASS
from .sources import Selector, iter_source_files

LOG = logging.getLogger(__name__)


class FileOutcome:
    """Result of one file in a batch: pass, fail (violation) or error."""

    def __init__(self, path: str, status: str, message: Optional[str] = None,
                 violation=None):
        self.path = path
        self.status = status
        self.message = message
        self.violation = violation

    @property
    def ok(self) -> bool:
        return self.status == STATUS_PASS

    def to_record(self) -> Dict[str, Any]:
        """Flatten for tabular reports."""
        v = self.violation
        return {
            'path': self.path,
            'status': self.status,
            'line': v.line_number if v else None,
            'column': v.column_number if v else None,
            'codepoint': f"U+{ord(v.character):04X}" if v else None,
            'script': v.script if v else None,
            'character_name': v.character_name if v else None,
            'message': self.message,
        }

    def __repr__(self):
        return f"FileOutcome({self.path!r}, {self.status!r})"


def scan_one(path, scripts: Sequence[str], marker: str) -> FileOutcome:
    """
    Scan a single file and fold every outcome into a FileOutcome.

    Runs in worker processes, so it must stay a module-level function.
    """
    path = str(path)
    try:
        result = scan_file(path, scripts, marker)
    except ScanIOError as e:
        LOG.debug(f"{path}: {e}")
        return FileOutcome(path, STATUS_ERROR, str(e))
    except ConfigurationError as e:
        # Unknown script in one of the file's directives
        LOG.debug(f"{path}: {e}")
        return FileOutcome(path, STATUS_ERROR, str(e))
    if result.ok:
        return FileOutcome(path, STATUS_PASS)
    return FileOutcome(path, STATUS_FAIL, result.message, result.violation)


def scan_paths(paths: Iterable, scripts: Optional[Sequence[str]] = None,
               marker: str = DEFAULT_MARKER, workers: int = 1) -> List[FileOutcome]:
    """
    Scan files independently and return outcomes in input order.

    Args:
        paths: Files to scan
        scripts: Allowed script names shared by all files (default: Latin, Common)
        marker: Directive keyword
        workers: Number of worker processes; 1 scans in this process

    Raises:
        ConfigurationError: if scripts contains an unknown name or marker is invalid (checked up front)
    """
    scripts = list(scripts) if scripts else list(DEFAULT_SCRIPTS)
    build_predicate(scripts)
    DirectiveParser(marker)
    paths = [str(p) for p in paths]

    if workers is None:
        workers = min(len(paths), os.cpu_count() or 4)

    if workers <= 1 or len(paths) <= 1:
        outcomes = [scan_one(p, scripts, marker) for p in paths]
    else:
        LOG.info(f"Scanning {len(paths)} files with {workers} workers")
        n = len(paths)
        with ProcessPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(scan_one, paths, [scripts] * n, [marker] * n,
                                         chunksize=max(1, n // (workers * 4))))

    counts = summarize(outcomes)
    LOG.info(
        f"Scanned {len(outcomes)} files: {counts[STATUS_PASS]} passed, "
        f"{counts[STATUS_FAIL]} failed, {counts[STATUS_ERROR]} errors"
    )
    return outcomes


def scan_tree(roots: Optional[Iterable] = None, scripts: Optional[Sequence[str]] = None,
              selector: Optional[Selector] = None, marker: str = DEFAULT_MARKER,
              workers: int = 1, exclude_dirs: Optional[Iterable[str]] = None) -> List[FileOutcome]:
    """
    Scan every selected file under roots (default: current directory).

    File selection is delegated to selector; see sources.default_selector.
    """
    paths = list(iter_source_files(roots, selector, exclude_dirs))
    LOG.debug(f"Selected {len(paths)} files")
    return scan_paths(paths, scripts, marker, workers)


def summarize(outcomes: Sequence[FileOutcome]) -> Dict[str, int]:
    """Count outcomes by status."""
    counts = {STATUS_PASS: 0, STATUS_FAIL: 0, STATUS_ERROR: 0}
    for outcome in outcomes:
        counts[outcome.status] += 1
    return counts
