# -*- coding: ascii -*-
"""mixedscripts: detect disallowed mixtures of Unicode scripts in text files."""

from .errors import ConfigurationError, MixedScriptsError, ScanIOError, UnknownScriptError
from .predicate import ScriptPredicate, build_predicate
from .directives import Directive, DirectiveKind, DirectiveParser
from .scanner import ScanResult, ScanState, Violation, scan_file, scan_lines
from .batch import FileOutcome, scan_paths, scan_tree
from .checks import assert_all_files_scripts_ok, assert_file_scripts_ok

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'MixedScriptsError',
    'ScanIOError',
    'UnknownScriptError',
    'ScriptPredicate',
    'build_predicate',
    'Directive',
    'DirectiveKind',
    'DirectiveParser',
    'ScanResult',
    'ScanState',
    'Violation',
    'scan_file',
    'scan_lines',
    'FileOutcome',
    'scan_paths',
    'scan_tree',
    'assert_all_files_scripts_ok',
    'assert_file_scripts_ok',
]
