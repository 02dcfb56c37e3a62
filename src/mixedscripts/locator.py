# -*- coding: ascii -*-
"""Failure localization and diagnostic messages."""

import unicodedata
from typing import NamedTuple, Optional, Tuple

from .predicate import ScriptPredicate, scripts_of
from .schema import MESSAGE_FORMAT, NO_NAME


class CharacterInfo(NamedTuple):
    script: str
    name: str


def locate(text: str, predicate: ScriptPredicate) -> Optional[Tuple[int, str]]:
    """
    Find the first character of text outside the predicate's scripts.

    Returns:
        (column, character) with a 1-based column counted in characters,
        or None when the whole text conforms
    """
    hit = predicate.first_violation(text)
    if hit is None:
        return None
    offset, char = hit
    return offset + 1, char


def describe(char: str) -> CharacterInfo:
    """Look up the display script(s) and Unicode name of a character."""
    scripts = scripts_of(char)
    script = ', '.join(scripts) if scripts else 'Unknown'
    return CharacterInfo(script, unicodedata.name(char, NO_NAME))


def format_message(path, line_number: int, column_number: int, script: str, name: str) -> str:
    return MESSAGE_FORMAT.format(
        script=script,
        name=name,
        line=line_number,
        column=column_number,
        path=path,
    )
