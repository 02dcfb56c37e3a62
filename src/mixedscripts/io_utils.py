# -*- coding: ascii -*-
"""Input/output utilities."""

import os
from typing import List, Dict, Any

import pandas as pd

REPORT_COLUMNS = ['path', 'status', 'line', 'column', 'codepoint', 'script', 'character_name', 'message']


def write_table(records: List[Dict[str, Any]], path: str) -> None:
    """Write report records as parquet, csv or json, chosen by file suffix."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    df = pd.DataFrame(records, columns=REPORT_COLUMNS)
    # Keep integer columns integral when some rows have no violation
    for col in ('line', 'column'):
        df[col] = pd.to_numeric(df[col], errors='coerce').astype('Int64')

    if path.endswith('.parquet'):
        df.to_parquet(path, index=False)
    elif path.endswith('.csv'):
        df.to_csv(path, index=False)
    elif path.endswith('.json'):
        df.to_json(path, orient='records', indent=2, force_ascii=True)
    else:
        raise ValueError(f"Unsupported file format: {path}")


def read_table(path: str) -> List[Dict[str, Any]]:
    """Read a report written by write_table back into records (inverse of write_table)."""
    if not os.path.exists(path):
        return []

    if path.endswith('.parquet'):
        df = pd.read_parquet(path)
    elif path.endswith('.csv'):
        df = pd.read_csv(path, dtype={'line': 'Int64', 'column': 'Int64'})
    elif path.endswith('.json'):
        df = pd.read_json(path, orient='records')
    else:
        raise ValueError(f"Unsupported file format: {path}")

    return df.to_dict('records')
