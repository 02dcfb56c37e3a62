# -*- coding: ascii -*-
"""
Script membership predicates.

A predicate answers "does every character of this text belong to one of the
declared scripts?" using the Unicode Script_Extensions property. Script_Extensions
is used instead of Script so that digits, punctuation and marks shared by
several scripts are accepted wherever any of those scripts is allowed.
"""

import functools
import logging
import re
from typing import Dict, Iterable, Optional, Tuple

import regex

from .errors import ConfigurationError, UnknownScriptError
from .schema import KNOWN_SCRIPTS

LOG = logging.getLogger(__name__)

_NAME_RE = re.compile(r'^[\w\s-]+$')


def _loose_key(name: str) -> str:
    """Loose matching key (UAX44-LM3): ignore case, spaces, '_' and '-'."""
    return re.sub(r'[\s_\-]', '', name).lower()


_CANONICAL: Dict[str, str] = {_loose_key(name): name for name in KNOWN_SCRIPTS}


def canonical_script_name(name: str) -> str:
    """
    Return the canonical spelling of a script name.

    Raises:
        UnknownScriptError: if name is not a known script
    """
    if not isinstance(name, str) or not _NAME_RE.match(name.strip()):
        raise UnknownScriptError(str(name))
    canonical = _CANONICAL.get(_loose_key(name))
    if canonical is None:
        raise UnknownScriptError(name)
    return canonical


def canonical_script_set(names: Iterable[str]) -> Tuple[str, ...]:
    """Canonicalize, deduplicate and sort script names into a cache key."""
    names = list(names)
    if not names:
        raise ConfigurationError("At least one script name is required")
    return tuple(sorted({canonical_script_name(n) for n in names}))


def _property_class(scripts: Tuple[str, ...]) -> str:
    return ''.join(f'\\p{{Script_Extensions={s}}}' for s in scripts)


class ScriptPredicate:
    """Compiled membership test for the union of a set of scripts."""

    def __init__(self, scripts: Tuple[str, ...]):
        self.scripts = scripts
        char_class = _property_class(scripts)
        try:
            self._members = regex.compile(f'[{char_class}]*')
            self._outsider = regex.compile(f'[^{char_class}]')
        except regex.error as e:
            # Known name, but absent from the installed regex's Unicode tables
            raise UnknownScriptError(', '.join(scripts), f"regex: {e}") from e

    def matches_all(self, text: str) -> bool:
        """Return True iff every character of text belongs to the scripts."""
        return self._members.fullmatch(text) is not None

    def first_violation(self, text: str) -> Optional[Tuple[int, str]]:
        """Return (offset, character) of the leftmost non-member, or None."""
        m = self._outsider.search(text)
        if m is None:
            return None
        return m.start(), m.group()

    def __eq__(self, other):
        if not isinstance(other, ScriptPredicate):
            return NotImplemented
        return self.scripts == other.scripts

    def __hash__(self):
        return hash(self.scripts)

    def __repr__(self):
        return f"ScriptPredicate({', '.join(self.scripts)})"


@functools.lru_cache(maxsize=256)
def _compile(scripts: Tuple[str, ...]) -> ScriptPredicate:
    LOG.debug(f"Compiling predicate for scripts: {', '.join(scripts)}")
    return ScriptPredicate(scripts)


def build_predicate(names: Iterable[str]) -> ScriptPredicate:
    """
    Build (or fetch from cache) the predicate for a list of script names.

    Args:
        names: Non-empty sequence of script names; order and duplicates are ignored

    Returns:
        ScriptPredicate for the union of the scripts

    Raises:
        ConfigurationError: if names is empty
        UnknownScriptError: if any name is not a known script
    """
    return _compile(canonical_script_set(names))


@functools.lru_cache(maxsize=None)
def _single_script_patterns() -> Tuple[Tuple[str, object], ...]:
    patterns = []
    for name in KNOWN_SCRIPTS:
        try:
            patterns.append((name, regex.compile(f'\\p{{Script_Extensions={name}}}')))
        except regex.error:
            LOG.debug(f"Script {name} not supported by installed regex module, skipped")
    return tuple(patterns)


def scripts_of(char: str) -> Tuple[str, ...]:
    """Return the Script_Extensions values of a single character."""
    return tuple(name for name, pattern in _single_script_patterns() if pattern.match(char))
