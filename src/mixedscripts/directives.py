# -*- coding: ascii -*-
"""In-text directives that change the allowed scripts.

Two forms are recognised, with ``mixedscripts`` as the default marker:

    text on one line  ## mixedscripts Latin,Cyrillic,Common  (anything here)

    =for mixedscripts Cyrillic,Common
    =for mixedscripts default

The first widens the allowed set for its own line only; the second replaces
the allowed set for every following line, and ``default`` restores the file
default. Parsing is purely syntactic: names are validated when a predicate
is built from them.
"""

import re
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .errors import ConfigurationError
from .schema import DEFAULT_MARKER, RESET_KEYWORD


class DirectiveKind(Enum):
    """What a line does to the active script set."""
    NONE = "none"                # plain text, validated against the active set
    INLINE = "inline"            # validated against its own set, state untouched
    PERSISTENT = "persistent"    # changes the active set, never validated itself


class Directive(NamedTuple):
    kind: DirectiveKind
    text: str
    scripts: Optional[Tuple[str, ...]] = None
    reset: bool = False


_SCRIPT_LIST = r'(\w+(?:\s*,\s*\w+)*)'


def split_script_list(value: str) -> Tuple[str, ...]:
    """Split "A, B,C" into ('A', 'B', 'C')."""
    return tuple(part.strip() for part in value.split(',') if part.strip())


class DirectiveParser:
    """Classifies lines for a given marker keyword."""

    def __init__(self, marker: str = DEFAULT_MARKER):
        if not marker or any(ch.isspace() for ch in marker):
            raise ConfigurationError(f"Directive marker must be a non-empty word: {marker!r}")
        self.marker = marker
        escaped = re.escape(marker)
        self._inline_re = re.compile(rf'\s*##\s+{escaped}\s+{_SCRIPT_LIST}.*$')
        self._persistent_re = re.compile(rf'^=for\s+{escaped}\s+{_SCRIPT_LIST}$')

    def parse(self, line: str) -> Directive:
        """
        Classify one line (without its line terminator).

        A line whose whole stripped content is "=for <marker> ..." is persistent;
        otherwise a trailing "## <marker> ..." comment makes it inline.
        """
        m = self._persistent_re.match(line.strip())
        if m:
            scripts = split_script_list(m.group(1))
            if len(scripts) == 1 and scripts[0] == RESET_KEYWORD:
                return Directive(DirectiveKind.PERSISTENT, line, reset=True)
            return Directive(DirectiveKind.PERSISTENT, line, scripts=scripts)

        m = self._inline_re.search(line)
        if m:
            return Directive(DirectiveKind.INLINE, line[:m.start()], scripts=split_script_list(m.group(1)))

        return Directive(DirectiveKind.NONE, line)
