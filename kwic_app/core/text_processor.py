"""
Text processing utilities for the KWIC search system.

Contains functions for tokenization, n-gram windows, keyword matching and
column justification.
"""

import re
from typing import Any, List, Optional

def tokenize(text: Any) -> List[str]:
    """Split text on whitespace; missing text has no tokens."""
    if text is None:
        return []
    return str(text).split()

def ngrams(tokens: List[str], n: int) -> List[List[str]]:
    """All contiguous windows of n tokens, stride 1."""
    if n <= 0 or len(tokens) < n:
        return []
    return [tokens[i:i + n] for i in range(len(tokens) - n + 1)]

def contains_keyword(text: str, keyword: str, pattern: Optional[re.Pattern] = None) -> bool:
    """Case-sensitive substring test, or a regex search when a pattern is given."""
    if pattern is not None:
        return pattern.search(text) is not None
    return keyword in text

def compile_keyword(keyword: str) -> re.Pattern:
    """Compile a keyword as a regular expression."""
    return re.compile(keyword)

def justify(values: List[str], how: str) -> List[str]:
    """Pad every value to the widest one: 'left', 'right' or 'centre'."""
    width = max((len(v) for v in values), default=0)
    if how == "left":
        return [v.ljust(width) for v in values]
    if how == "right":
        return [v.rjust(width) for v in values]
    if how == "centre":
        out = []
        for v in values:
            pad = width - len(v)
            left = pad // 2
            out.append(" " * left + v + " " * (pad - left))
        return out
    raise ValueError(f"Unknown justification: {how}")
