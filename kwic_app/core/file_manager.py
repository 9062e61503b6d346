"""
File management utilities for the KWIC search system.

Loads document tables from JSONL or CSV and saves match tables as JSONL,
CSV or KWIC display text.
"""

import csv
import json
import os
from typing import Optional
from ..config.settings import TEXT_COLUMN, KWIC_COLUMNS, OUTPUT_FORMATS, get_output_format
from .errors import InvalidArgumentError
from .table import Table

def _load_jsonl(input_file: str, limit: int):
    records = []
    with open(input_file, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f):
            if not line.strip():
                continue

            if limit > 0 and len(records) >= limit:
                break

            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                print(f"[ERROR] Failed to parse line {line_num+1}: {e}")
                continue

            if not isinstance(record, dict):
                print(f"[ERROR] Line {line_num+1} is not a JSON object, skipping")
                continue

            records.append(record)
    return records

def _load_csv(input_file: str, limit: int):
    records = []
    with open(input_file, 'r', encoding='utf-8', newline='') as f:
        for record in csv.DictReader(f):
            if limit > 0 and len(records) >= limit:
                break
            records.append(record)
    return records

def load_documents(input_file: str, limit: int = 0, text_field: str = TEXT_COLUMN) -> Table:
    """Load a document table from a JSONL or CSV file with optional limit."""
    ext = os.path.splitext(input_file)[1].lower()
    if ext == ".csv":
        records = _load_csv(input_file, limit)
    else:
        records = _load_jsonl(input_file, limit)

    if text_field != TEXT_COLUMN:
        records = [
            {(TEXT_COLUMN if key == text_field else key): value for key, value in record.items()}
            for record in records
        ]

    table = Table.from_records(records)
    print(f"[INFO] Loaded {len(table)} documents from {os.path.basename(input_file)}")
    return table

def save_results(results: Table, output_file: str, fmt: Optional[str] = None):
    """Save a match table to output file."""
    fmt = get_output_format(output_file, fmt)
    if fmt not in OUTPUT_FORMATS:
        raise InvalidArgumentError(f"Unknown output format '{fmt}', expected one of {OUTPUT_FORMATS}")

    if fmt == "jsonl":
        with open(output_file, 'w', encoding='utf-8') as f:
            for record in results.to_records():
                f.write(json.dumps(record, ensure_ascii=False) + '\n')
    elif fmt == "csv":
        with open(output_file, 'w', encoding='utf-8', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=results.columns)
            writer.writeheader()
            writer.writerows(results.to_records())
    else:
        with open(output_file, 'w', encoding='utf-8') as f:
            for line in results.to_lines(KWIC_COLUMNS):
                f.write(line + '\n')

    print(f"[INFO] Results saved to {output_file}")
