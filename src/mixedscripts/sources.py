# -*- coding: ascii -*-
"""
Selection of files to scan.

Which files count as text is a policy decision, so the batch scanner takes
any ``Callable[[Path], bool]``; ``default_selector`` is a reasonable one for
source repositories.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .schema import BINARY_SUFFIXES, EXCLUDE_DIRS, TEXT_SUFFIXES

LOG = logging.getLogger(__name__)

Selector = Callable[[Path], bool]


def has_shebang(path: Path) -> bool:
    """Return True if the file starts with "#!"."""
    try:
        with open(path, 'rb') as f:
            return f.read(2) == b'#!'
    except OSError as e:
        LOG.debug(f"Cannot sniff {path}: {e}")
        return False


def make_selector(extensions: Optional[Iterable[str]] = None) -> Selector:
    """
    Build a selector accepting the given suffixes plus extensionless scripts.

    Args:
        extensions: Suffixes such as ".py" (default: TEXT_SUFFIXES)
    """
    suffixes = frozenset(
        (e if e.startswith('.') else '.' + e).lower() for e in extensions
    ) if extensions else TEXT_SUFFIXES

    def selector(path: Path) -> bool:
        suffix = path.suffix.lower()
        if suffix in BINARY_SUFFIXES:
            return False
        if suffix in suffixes:
            return True
        return suffix == '' and has_shebang(path)

    return selector


default_selector = make_selector()


def _is_excluded(dirname: str, exclude_dirs) -> bool:
    return dirname in exclude_dirs or dirname.endswith('.egg-info')


def iter_source_files(roots: Optional[Iterable] = None,
                      selector: Optional[Selector] = None,
                      exclude_dirs: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """
    Yield files under roots accepted by selector, in a stable order.

    Args:
        roots: Directories or files (default: current directory). Files named
            explicitly are yielded without consulting the selector.
        selector: File predicate (default: default_selector)
        exclude_dirs: Directory names never descended into (default: EXCLUDE_DIRS)
    """
    roots = list(roots) if roots else [Path('.')]
    selector = selector or default_selector
    exclude = frozenset(exclude_dirs) if exclude_dirs is not None else EXCLUDE_DIRS

    for root in roots:
        root = Path(root)
        if root.is_file():
            yield root
            continue
        if not root.is_dir():
            LOG.warning(f"Skipping {root}: not a file or directory")
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not _is_excluded(d, exclude))
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if selector(path):
                    yield path
