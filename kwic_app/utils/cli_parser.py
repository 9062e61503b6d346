"""
Command-line interface parser for the KWIC search system.

Handles argument parsing, validation, and configuration output.
"""

import argparse
import os
from ..config.settings import DEFAULT_WINDOW, DEFAULT_OUTPUT, OUTPUT_FORMATS, TEXT_COLUMN

def parse_arguments(argv=None):
    """Parse command-line arguments for the KWIC search."""
    parser = argparse.ArgumentParser(description="Keyword-in-context search over a document table")

    # Required arguments
    parser.add_argument("--input", required=True,
                       help="Input JSONL or CSV file with a text field per document")
    parser.add_argument("--keyword", required=True,
                       help="Keyword to search for")

    # Optional arguments
    parser.add_argument("--window", type=int, default=DEFAULT_WINDOW,
                       help="Number of tokens in the context window (odd values are rounded up)")
    parser.add_argument("--out", default=DEFAULT_OUTPUT,
                       help="Output file")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                       help="Output format (default: from the output file extension)")
    parser.add_argument("--limit", type=int, default=0,
                       help="Limit number of documents (0 = all)")
    parser.add_argument("--text_field", default=TEXT_COLUMN,
                       help="Name of the input field holding the document text")
    parser.add_argument("--regex", action="store_true",
                       help="Treat the keyword as a regular expression")

    return parser.parse_args(argv)

def print_configuration(args):
    """Print the current configuration."""
    mode = "regex" if args.regex else "substring"
    print(f"[CONFIG] Keyword: '{args.keyword}' ({mode}) | window={args.window}")
    print(f"[CONFIG] Input file: {args.input} | text field: {args.text_field}")
    print(f"[CONFIG] Output file: {args.out}")

def validate_arguments(args) -> bool:
    """Validate command-line arguments."""
    if not os.path.exists(args.input):
        print(f"[ERROR] Input file not found: {args.input}")
        return False

    if not args.keyword:
        print(f"[ERROR] Keyword must not be empty")
        return False

    if args.window <= 0:
        print(f"[ERROR] Window must be positive")
        return False

    if args.limit < 0:
        print(f"[ERROR] Limit must be non-negative")
        return False

    return True
