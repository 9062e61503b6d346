"""
General settings and constants for the KWIC search system.

Contains column names, window defaults, and output settings.
"""

import os
from typing import List, Optional

# Input schema
TEXT_COLUMN = "text"

# Window settings
DEFAULT_WINDOW = 6

# Output schema
SEPARATOR = "|"
SEPARATOR_COLUMNS = ("s1", "s2")
KWIC_COLUMNS = ["pre", "s1", "target", "s2", "post"]
WORD_COLUMN_PREFIX = "word"
METADATA_SUFFIX = "_meta"  # appended to metadata columns named like a generated column

# Output settings
DEFAULT_OUTPUT = "results_kwic.jsonl"
OUTPUT_FORMATS = ("jsonl", "csv", "txt")

# Batching settings
DEFAULT_BATCH_SIZE = 2
GROUP_COLUMN = "group"

def get_word_columns(window: int) -> List[str]:
    """Names of the raw token columns for a window size."""
    return [f"{WORD_COLUMN_PREFIX}{i}" for i in range(1, window + 1)]

def get_output_format(path: str, fmt: Optional[str] = None) -> str:
    """Resolve the output format from an explicit value or the file extension."""
    if fmt:
        return fmt.lower()
    ext = os.path.splitext(path)[1].lstrip(".").lower()
    return ext or OUTPUT_FORMATS[0]
