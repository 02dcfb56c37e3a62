# -*- coding: ascii -*-
from contextlib import contextmanager

from .errors import ScanIOError


@contextmanager
def scan_guard(path):
    """Convert OS and decoding errors raised while reading path into ScanIOError."""
    try:
        yield
    except ScanIOError:
        raise
    except UnicodeDecodeError as e:
        raise ScanIOError(path, f"invalid UTF-8 at byte offset {e.start}") from e
    except OSError as e:
        raise ScanIOError(path, e.strerror or str(e)) from e
