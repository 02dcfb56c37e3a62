# -*- coding: ascii -*-
"""
Repository-wide mixed-script checker.

Scans all text files in the repository and reports the first character of
each file that falls outside the allowed Unicode scripts. Intended as a CI
gate against look-alike characters from other scripts.

Usage:
    python scripts/check_mixed_scripts_repo.py [root_directory] [Script,Script...]

By default, checks the current directory recursively against Latin,Common.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src'))

from mixedscripts.batch import scan_tree, summarize
from mixedscripts.directives import split_script_list
from mixedscripts.schema import STATUS_ERROR


def main(root=".", scripts=None):
    """Scan repository and return a process exit code."""
    print(f"Scanning {os.path.abspath(root)} for mixed scripts...")

    outcomes = scan_tree([root], scripts)
    counts = summarize(outcomes)

    print(f"Checked {len(outcomes)} text files.")

    bad = [o for o in outcomes if not o.ok]
    if bad:
        print(f"\nFound {len(bad)} files with problems:")
        for outcome in bad:
            print(f"  - {outcome.message}")
        return 2 if counts[STATUS_ERROR] else 1

    print("Mixed-script check PASSED - all text files use allowed scripts only.")
    return 0


if __name__ == "__main__":
    root_dir = sys.argv[1] if len(sys.argv) > 1 else "."
    script_names = list(split_script_list(sys.argv[2])) if len(sys.argv) > 2 else None
    sys.exit(main(root_dir, script_names))
