#!/usr/bin/env python3
"""
KWIC Search - Command-line entry point

Loads a document table, runs the keyword-in-context extraction and saves the matches.
"""

import time
from typing import Any, Dict, List

from .config.settings import TEXT_COLUMN, KWIC_COLUMNS
from .core.errors import KwicError
from .core.file_manager import load_documents, save_results
from .core.kwic import extract_kwic, count_matches
from .core.table import Table
from .utils.cli_parser import parse_arguments, print_configuration, validate_arguments

def document_label(documents: Table, index: int) -> str:
    """Short label for a document: its position plus any metadata values."""
    row = documents.rows[index]
    values = [str(row.get(col)) for col in documents.columns if col != TEXT_COLUMN and row.get(col) is not None]
    label = f"document {index + 1}"
    return f"{label} ({', '.join(values)})" if values else label

def summarize(documents: Table, counts: List[int], results: Table) -> Dict[str, Any]:
    """Count matches overall and per source document."""
    return {
        "documents": len(documents),
        "matches": len(results),
        "documents_with_matches": sum(1 for c in counts if c > 0),
        "per_document": {document_label(documents, i): c for i, c in enumerate(counts) if c > 0},
    }

def print_summary(summary: Dict[str, Any], preview: List[str]):
    """Print processing summary."""
    print(f"\n[SUMMARY] Searched {summary['documents']} documents")
    print(f"[SUMMARY] Total matches: {summary['matches']}")
    print(f"[SUMMARY] Documents with matches: {summary['documents_with_matches']}")

    if summary["per_document"]:
        print(f"\n[MATCHES PER DOCUMENT]")
        for label, count in summary["per_document"].items():
            print(f"  {label}: {count}")

    if preview:
        print(f"\n[MATCHES]")
        for line in preview:
            print(f"  {line}")

def main(argv=None):
    """Main entry point for the KWIC search."""
    try:
        args = parse_arguments(argv)
        if not validate_arguments(args):
            print("[ERROR] Invalid arguments provided")
            return 1

        print_configuration(args)

        print(f"[INFO] Loading documents from {args.input}...")
        documents = load_documents(args.input, args.limit, args.text_field)

        if len(documents) == 0:
            print("[ERROR] No valid documents found")
            return 1

        t0 = time.time()
        results = extract_kwic(documents, args.keyword, args.window, regex=args.regex)
        print(f"[INFO] Found {len(results)} matches in {time.time() - t0:.3f}s")

        save_results(results, args.out, args.format)

        counts = count_matches(documents, args.keyword, args.window, regex=args.regex)
        print_summary(summarize(documents, counts, results), results.to_lines(KWIC_COLUMNS)[:10])

        print(f"\n[SUCCESS] Search completed successfully!")
        return 0

    except KeyboardInterrupt:
        print(f"\n[INTERRUPTED] Search stopped by user")
        return 130

    except KwicError as e:
        print(f"\n[ERROR] {e}")
        return 1

    except Exception as e:
        print(f"\n[ERROR] Unexpected error: {e}")
        return 1

if __name__ == "__main__":
    exit(main())
