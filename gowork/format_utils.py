"""
Output format utilities for gowork CLI commands.

Provides functions to format data as CSV, TSV, YAML, JSON, and JSONL.
"""

import csv
import io
import json
import os
from typing import Any, Dict, Iterator, List, Optional

import yaml

FORMATS = ('json', 'jsonl', 'csv', 'tsv', 'yaml')


def format_output(data: Iterator[Dict[str, Any]], format: str,
                  fields: Optional[List[str]] = None) -> Iterator[str]:
    """
    Format data according to the specified format.

    JSONL streams; the other formats collect all items first.

    Args:
        data: Iterator of dictionaries to format
        format: Output format (json, jsonl, csv, tsv, yaml)
        fields: Optional list of fields to include (for CSV/TSV)

    Yields:
        Formatted strings for output
    """
    if format == "jsonl":
        yield from format_jsonl(data)
    elif format == "json":
        yield from format_json(data)
    elif format == "csv":
        yield from format_delimited(data, fields, ',')
    elif format == "tsv":
        yield from format_delimited(data, fields, '\t')
    elif format == "yaml":
        yield from format_yaml(data)
    else:
        raise ValueError(f"Unknown format: {format}")


def format_jsonl(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as JSON Lines (one JSON object per line)."""
    for item in data:
        yield json.dumps(item, ensure_ascii=False)


def format_json(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as a single JSON array."""
    yield json.dumps(list(data), ensure_ascii=False, indent=2)


def format_yaml(data: Iterator[Dict[str, Any]]) -> Iterator[str]:
    """Format data as YAML."""
    yield yaml.dump(list(data), default_flow_style=False, allow_unicode=True, sort_keys=False)


def format_delimited(data: Iterator[Dict[str, Any]], fields: Optional[List[str]] = None,
                     delimiter: str = ',') -> Iterator[str]:
    """
    Format data as CSV or TSV.

    Args:
        data: Iterator of dictionaries
        fields: Fields to include. If None, uses the keys of the first item.
        delimiter: Column delimiter
    """
    data_list = list(data)
    if not data_list:
        return

    if fields is None:
        fields = list(data_list[0].keys())

    output = io.StringIO()
    writer = csv.DictWriter(output, fieldnames=fields, delimiter=delimiter,
                            extrasaction='ignore', lineterminator='\n')
    writer.writeheader()
    for item in data_list:
        writer.writerow(item)

    yield output.getvalue().rstrip('\n')


def get_format_from_env(default: str = 'jsonl') -> str:
    """
    Get output format from the GOWORK_FORMAT environment variable.

    Unknown values fall back to ``default``.
    """
    format = os.environ.get('GOWORK_FORMAT', default).lower()
    if format not in FORMATS:
        return default
    return format
