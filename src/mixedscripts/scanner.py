# -*- coding: ascii -*-
"""
Line scanner.

A scan is a fold over the lines of a file: ``step`` takes the current
ScanState and one line and returns the next state plus an optional
Violation. Persistent directives produce a new state; inline directives and
plain lines leave it unchanged. The fold stops at the first violation.
"""

import logging
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from .directives import DirectiveKind, DirectiveParser
from .errors import UnknownScriptError
from .guard import scan_guard
from .locator import describe, format_message, locate
from .predicate import ScriptPredicate, build_predicate, canonical_script_set
from .schema import DEFAULT_MARKER, DEFAULT_SCRIPTS

LOG = logging.getLogger(__name__)


class Violation(NamedTuple):
    line_number: int
    column_number: int
    character: str
    script: str
    character_name: str

    def message(self, path) -> str:
        return format_message(path, self.line_number, self.column_number,
                              self.script, self.character_name)


class ScanState:
    """Script set in force for ordinary lines, with its compiled predicate."""

    def __init__(self, default: Tuple[str, ...], active: Optional[Tuple[str, ...]] = None):
        self.default = default
        self.active = active if active is not None else default
        self.predicate: ScriptPredicate = build_predicate(self.active)

    @classmethod
    def initial(cls, scripts: Optional[Sequence[str]] = None) -> 'ScanState':
        """Create the start-of-file state; empty or missing scripts mean the defaults."""
        return cls(canonical_script_set(scripts or DEFAULT_SCRIPTS))

    def activate(self, scripts: Sequence[str]) -> 'ScanState':
        """Return the state with scripts in force for the following lines."""
        return ScanState(self.default, canonical_script_set(scripts))

    def reset(self) -> 'ScanState':
        """Return the state with the file default in force again."""
        return ScanState(self.default)

    def __eq__(self, other):
        if not isinstance(other, ScanState):
            return NotImplemented
        return self.default == other.default and self.active == other.active

    def __repr__(self):
        return f"ScanState(default={self.default}, active={self.active})"


def strip_terminator(line: str) -> str:
    """Drop a trailing "\\n" or "\\r\\n"."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def check_text(text: str, predicate: ScriptPredicate, line_number: int) -> Optional[Violation]:
    """Validate one line of text, returning the first violation if any."""
    if predicate.matches_all(text):
        return None
    column, char = locate(text, predicate)
    info = describe(char)
    return Violation(line_number, column, char, info.script, info.name)


def step(state: ScanState, line_number: int, line: str,
         parser: DirectiveParser) -> Tuple[ScanState, Optional[Violation]]:
    """
    Process one line.

    Args:
        state: State carried over from the previous line
        line_number: 1-based number of this line
        line: Line content, terminator optional
        parser: Directive parser for the file's marker

    Returns:
        (next_state, violation) where violation is None if the line conforms

    Raises:
        UnknownScriptError: if a directive names an unknown script
    """
    directive = parser.parse(strip_terminator(line))

    if directive.kind is DirectiveKind.PERSISTENT:
        if directive.reset:
            LOG.debug(f"Line {line_number}: scripts reset to {', '.join(state.default)}")
            return state.reset(), None
        try:
            new_state = state.activate(directive.scripts)
        except UnknownScriptError as e:
            raise UnknownScriptError(e.name, f"directive on line {line_number}") from e
        LOG.debug(f"Line {line_number}: scripts set to {', '.join(new_state.active)}")
        return new_state, None

    if directive.kind is DirectiveKind.INLINE:
        try:
            predicate = build_predicate(directive.scripts)
        except UnknownScriptError as e:
            raise UnknownScriptError(e.name, f"directive on line {line_number}") from e
        return state, check_text(directive.text, predicate, line_number)

    return state, check_text(directive.text, state.predicate, line_number)


def scan_lines(lines: Iterable[str], scripts: Optional[Sequence[str]] = None,
               marker: str = DEFAULT_MARKER) -> Optional[Violation]:
    """
    Scan an iterable of lines and return the first violation, or None.

    Script names are validated before the first line is consumed.
    """
    state = ScanState.initial(scripts)
    parser = DirectiveParser(marker)
    for line_number, line in enumerate(lines, start=1):
        state, violation = step(state, line_number, line, parser)
        if violation is not None:
            return violation
    return None


class ScanResult:
    """Outcome of scanning one file."""

    def __init__(self, path, violation: Optional[Violation] = None):
        self.path = str(path)
        self.violation = violation

    @property
    def ok(self) -> bool:
        return self.violation is None

    @property
    def message(self) -> Optional[str]:
        if self.violation is None:
            return None
        return self.violation.message(self.path)

    def __repr__(self):
        return f"ScanResult({self.path!r}, {self.violation!r})"


def scan_file(path, scripts: Optional[Sequence[str]] = None,
              marker: str = DEFAULT_MARKER) -> ScanResult:
    """
    Check that every character of a UTF-8 text file belongs to allowed scripts.

    Args:
        path: File to scan
        scripts: Allowed script names (default: Latin and Common)
        marker: Directive keyword recognised in the file

    Returns:
        ScanResult, with the first violation if any

    Raises:
        ConfigurationError: unknown or empty script names, in the call or in a directive
        ScanIOError: the file cannot be opened, read or decoded
    """
    state = ScanState.initial(scripts)
    parser = DirectiveParser(marker)
    violation = None

    with scan_guard(path):
        # Split on "\n" only so line numbers match what editors show
        with open(path, 'r', encoding='utf-8', newline='\n') as f:
            for line_number, line in enumerate(f, start=1):
                try:
                    state, violation = step(state, line_number, line, parser)
                except UnknownScriptError as e:
                    raise UnknownScriptError(e.name, f"{path}, {e.where}") from e
                if violation is not None:
                    break

    result = ScanResult(path, violation)
    if violation is None:
        LOG.debug(f"{path}: ok")
    else:
        LOG.debug(f"{path}: {result.message}")
    return result
